from __future__ import annotations
import math
import re
from typing import Optional

DEFAULT_CHARS_PER_MINUTE = 500   # 분당 읽는 글자 수 (정책 값)

_TAG_RE = re.compile(r"<[^>]*>")


def strip_tags(content: Optional[str]) -> str:
    # 글자 수 계산 전용. 출력 정화 용도로 쓰지 말 것 (sanitize 사용)
    if not content:
        return ""
    return _TAG_RE.sub("", content)


def estimate_minutes(content: Optional[str], chars_per_minute: int = DEFAULT_CHARS_PER_MINUTE) -> int:
    """
    태그를 제거한 글자 수 기준 읽기 시간(분).
    보이는 글자가 없으면 0, 있으면 ceil(글자수 / chars_per_minute) (항상 1 이상).
    """
    length = len(strip_tags(content))
    if length == 0:
        return 0
    return math.ceil(length / max(chars_per_minute, 1))
