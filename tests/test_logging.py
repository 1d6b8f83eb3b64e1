import json

import pytest
from loguru import logger

from blog_api.utils.logging import setup_logging


@pytest.fixture
def restore_logger():
    yield
    # enqueue 싱크를 닫아 파일 기록을 마무리
    logger.remove()


def test_file_sink_respects_level(tmp_path, restore_logger):
    log_file = tmp_path / "api.log"
    setup_logging("warning", log_file=str(log_file))

    logger.info("[PostService] quiet")
    logger.warning("[PostService] loud")
    logger.remove()

    text = log_file.read_text(encoding="utf-8")
    assert "[PostService] loud" in text
    assert "quiet" not in text
    assert "| WARNING |" in text


def test_json_logs_are_serialized(capsys, restore_logger):
    setup_logging("INFO", json_logs=True)

    logger.info("created post id={}", "abc")
    logger.remove()

    line = capsys.readouterr().out.strip().splitlines()[-1]
    record = json.loads(line)
    assert record["record"]["message"] == "created post id=abc"
    assert record["record"]["level"]["name"] == "INFO"
