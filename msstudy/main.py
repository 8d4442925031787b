from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger

from .core.config import settings
from .core.database_sync import init_db
from .core.error_handlers import register_error_handlers
from .routers import demo_resource


# --- 1. 定义 Lifespan (生命周期) ---
@asynccontextmanager
async def lifespan(app: FastAPI):
    # [Startup] 启动时执行
    logger.info("🚀 msstudy API is starting up...")
    if settings.database.create_schema:
        init_db()
        logger.info("✅ Database schema created (demo).")

    yield  # 应用程序在此处运行

    # [Shutdown] 关闭时执行
    logger.info("👋 msstudy API is shutting down...")


# --- 2. 实例化 App (注入 lifespan) ---
app = FastAPI(
    title="msstudy API",
    description="Demo 实体的增删改查服务",
    version="1.0.0",
    lifespan=lifespan,
)

# --- 3. 核心配置：CORS ---
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# --- 4. 异常处理与路由 ---
register_error_handlers(app)
app.include_router(demo_resource.router, prefix="/api")


# --- 5. 健康检查 ---
@app.get("/", tags=["Health"])
def root():
    return {
        "status": "online",
        "project": "msstudy",
        "version": "1.0.0",
        "docs_url": "/docs",
    }


# --- 6. 命令行启动 ---
def run() -> None:
    """启动入口：`msstudy` 命令或 `python -m msstudy.main`"""
    import uvicorn

    uvicorn.run("msstudy.main:app", host=settings.host, port=settings.port, reload=settings.debug)


if __name__ == "__main__":
    run()
