from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from loguru import logger

from blog_api.common.exceptions import FieldValidationError, NotFoundError, StoreError
from blog_api.routers import admin_post_router, category_router, post_router
from blog_api.settings import settings
from blog_api.utils.logging import setup_logging_from

setup_logging_from(settings)

app = FastAPI(title="Blog API")

app.include_router(post_router.router, prefix="/posts", tags=["Post API"])
app.include_router(admin_post_router.router, prefix="/admin/posts", tags=["Admin Post API"])
app.include_router(category_router.router, prefix="/categories", tags=["Category API"])
app.include_router(category_router.admin_router, prefix="/admin/categories", tags=["Admin Category API"])


@app.exception_handler(FieldValidationError)
async def field_validation_handler(request: Request, exc: FieldValidationError):
    logger.warning("[{} {}] validation failed: {}", request.method, request.url.path, exc)
    # FastAPI 요청 검증 오류와 같은 형태로 반환
    return JSONResponse(
        status_code=422,
        content={"detail": [{"loc": ["body", exc.field], "msg": exc.message, "type": "value_error"}]},
    )


@app.exception_handler(NotFoundError)
async def not_found_handler(request: Request, exc: NotFoundError):
    logger.info("[{} {}] {}", request.method, request.url.path, exc)
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"detail": exc.detail})


@app.exception_handler(StoreError)
async def store_error_handler(request: Request, exc: StoreError):
    logger.error("[{} {}] {}", request.method, request.url.path, exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Storage operation failed."},
    )


@app.get("/")
def health_check():
    return {"status": "ok"}
