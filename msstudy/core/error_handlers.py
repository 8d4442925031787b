"""全局异常处理：把领域异常转换为结构化 JSON 响应

- BadRequestAlertError → 400，带 entityName / errorKey 以及 X-<app>-error 头
- EntityNotFoundError  → 404
- 其余（数据库连接、约束错误等）不在此处理，交给框架默认的 500
"""
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from loguru import logger

from .config import settings
from .exceptions import BadRequestAlertError, EntityNotFoundError
from .headers import create_failure_alert

PROBLEM_BASE_URL = "https://www.jhipster.tech/problem"
BAD_REQUEST_TYPE = f"{PROBLEM_BASE_URL}/problem-with-message"


def register_error_handlers(app: FastAPI) -> None:
    """在 FastAPI 应用上注册全部异常处理器"""

    @app.exception_handler(BadRequestAlertError)
    async def bad_request_alert_handler(request: Request, exc: BadRequestAlertError):
        logger.warning(
            "Bad request on {}: {} ({})", request.url.path, exc.message, exc.error_key
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={
                "entityName": exc.entity_name,
                "errorKey": exc.error_key,
                "type": BAD_REQUEST_TYPE,
                "title": exc.message,
                "status": status.HTTP_400_BAD_REQUEST,
                "message": f"error.{exc.error_key}",
                "params": exc.entity_name,
            },
            headers=create_failure_alert(settings.app_name, exc.entity_name, exc.error_key),
        )

    @app.exception_handler(EntityNotFoundError)
    async def entity_not_found_handler(request: Request, exc: EntityNotFoundError):
        logger.info("Not found on {}: {}", request.url.path, exc)
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={"detail": str(exc)},
        )
