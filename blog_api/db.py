from typing import Generator, Optional

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, declarative_base, Session

from blog_api.settings import settings


Base = declarative_base()

_engine: Optional[Engine] = None
_SessionLocal: Optional[sessionmaker] = None


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    # sqlite 는 기본적으로 FK 제약을 끈 채로 연결됨
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def configure_engine(engine: Engine) -> Engine:
    if engine.dialect.name == "sqlite":
        event.listen(engine, "connect", _enable_sqlite_foreign_keys)
    return engine


def get_engine() -> Engine:
    global _engine
    if _engine is None:
        _engine = configure_engine(create_engine(settings.database_url, **settings.engine_kwargs()))
    return _engine


def get_session_factory() -> sessionmaker:
    global _SessionLocal
    if _SessionLocal is None:
        _SessionLocal = sessionmaker(
            bind=get_engine(),
            autocommit=False,
            autoflush=False,
            expire_on_commit=False,
            future=True,
        )
    return _SessionLocal


def get_db() -> Generator[Session, None, None]:
    SessionLocal = get_session_factory()
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def create_tables(engine: Optional[Engine] = None) -> None:
    # 모델 import 이후 호출 필요
    from blog_api import models  # noqa: F401
    Base.metadata.create_all(bind=engine or get_engine())
