from __future__ import annotations
import typer
import uvicorn
from loguru import logger

from blog_api.settings import settings
from blog_api.services.db_service import create_tables
from blog_api.utils.logging import setup_logging_from

app = typer.Typer(pretty_exceptions_show_locals=False)

@app.command("init-db")
def init_db():
    """테이블을 생성합니다 (이미 있으면 건너뜀)."""
    setup_logging_from(settings)
    create_tables()
    logger.info("[OK] tables created on {}", settings.database_url.split("@")[-1])

@app.command("serve")
def serve(
    host: str = typer.Option("0.0.0.0", help="bind host"),
    port: int = typer.Option(8000, help="bind port"),
    reload: bool = typer.Option(False, help="auto reload (dev)"),
):
    """API 서버 실행."""
    setup_logging_from(settings)
    logger.info("[BOOT] serve() host={} port={}", host, port)
    uvicorn.run("blog_api.main:app", host=host, port=port, reload=reload)

if __name__ == "__main__":
    app()
