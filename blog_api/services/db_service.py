# services/db_service.py
from contextlib import contextmanager
from typing import Generator, Iterator

from loguru import logger
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from blog_api.common.exceptions import StoreError
from blog_api.db import get_db as _get_db, create_tables as _create_tables


def get_db() -> Generator[Session, None, None]:
    """
    FastAPI Depends에서 사용.
    라우터는 "from blog_api.services.db_service import get_db" 만 참조하고,
    테스트는 이 함수를 dependency_overrides 로 교체합니다.
    """
    yield from _get_db()


@contextmanager
def store_guard(db: Session, operation: str) -> Iterator[Session]:
    """
    SQLAlchemy 오류를 StoreError 로 감싸서 올림.
    실패 시 세션은 롤백하고, 재시도는 하지 않습니다.
    """
    try:
        yield db
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception("[Store] {} failed: {}", operation, e)
        raise StoreError(operation) from e


create_tables = _create_tables
