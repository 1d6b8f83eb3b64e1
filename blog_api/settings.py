from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional, Dict, Any
from urllib.parse import quote_plus

class Settings(BaseSettings):
    # === DB 연결 정보 ===
    # DATABASE_URL 이 있으면 그대로 사용 (로컬/테스트는 sqlite)
    DATABASE_URL: Optional[str] = None
    DB_USER: str = "blog"
    DB_PASSWORD: str = ""
    DB_HOST: str = "database"
    DB_INTERNAL_PORT: int = 3306
    MANAGER_DB_NAME: str = "blog"

    # === 커넥션 풀/엔진 옵션 ===
    DB_ECHO: bool = False
    DB_POOL_SIZE: int = 5
    DB_MAX_OVERFLOW: int = 10
    DB_POOL_RECYCLE_SEC: int = 1800
    DB_POOL_PRE_PING: bool = True
    DB_POOL_TIMEOUT_SEC: int = 30

    # 드라이버 타임아웃
    DB_CONNECT_TIMEOUT_SEC: int = 10
    DB_READ_TIMEOUT_SEC: int = 30
    DB_WRITE_TIMEOUT_SEC: int = 30

    # === 콘텐츠 정책 ===
    READING_CHARS_PER_MINUTE: int = 500
    RELATED_POSTS_LIMIT: int = 3

    # === 로깅 ===
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = False
    LOG_FILE: Optional[str] = None
    LOG_ROTATION: str = "10 MB"
    LOG_RETENTION: str = "7 days"

    model_config = SettingsConfigDict(
        env_prefix="",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @property
    def is_sqlite(self) -> bool:
        return self.database_url.startswith("sqlite")

    @property
    def database_url(self) -> str:
        if self.DATABASE_URL:
            return self.DATABASE_URL
        user = quote_plus(self.DB_USER)
        pwd = quote_plus(self.DB_PASSWORD)
        return (
            f"mysql+pymysql://{user}:{pwd}@{self.DB_HOST}:{self.DB_INTERNAL_PORT}/{self.MANAGER_DB_NAME}"
            f"?charset=utf8mb4"
            f"&connect_timeout={self.DB_CONNECT_TIMEOUT_SEC}"
            f"&read_timeout={self.DB_READ_TIMEOUT_SEC}"
            f"&write_timeout={self.DB_WRITE_TIMEOUT_SEC}"
        )

    def engine_kwargs(self) -> Dict[str, Any]:
        if self.is_sqlite:
            # sqlite 는 풀 옵션을 받지 않음
            return {
                "echo": self.DB_ECHO,
                "connect_args": {"check_same_thread": False},
                "future": True,
            }
        return {
            "echo": self.DB_ECHO,
            "pool_pre_ping": self.DB_POOL_PRE_PING,
            "pool_size": self.DB_POOL_SIZE,
            "max_overflow": self.DB_MAX_OVERFLOW,
            "pool_recycle": self.DB_POOL_RECYCLE_SEC,
            "pool_timeout": self.DB_POOL_TIMEOUT_SEC,
            "future": True,
        }

settings = Settings()
