"""同步数据库模块（FastAPI 专用）

- 使用 SQLModel + SQLAlchemy QueuePool
- 连接池参数、日志等从 `settings.database` 读取
- 提供：
    engine               —— 全局同步引擎
    SessionFactory       —— `sessionmaker` 工厂
    get_db               —— FastAPI `Depends`（同步）
    init_db              —— 按模型元数据建表
    transactional        —— 写事务：成功提交，异常回滚
    read_only            —— 只读事务：结束时一律回滚
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Iterator, Iterable

from loguru import logger
from sqlalchemy import text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import Session, SQLModel, create_engine

from .config import settings

# ---------------------------------------------------------------------------
# 配置读取（带默认值）
# ---------------------------------------------------------------------------
_db_conf = settings.database

POOL_SIZE: int = getattr(_db_conf, "pool_size", 10)
MAX_OVERFLOW: int = getattr(_db_conf, "max_overflow", 20)
POOL_RECYCLE: int = getattr(_db_conf, "pool_recycle", 180)  # 秒
ECHO_LOG: bool = getattr(_db_conf, "echo_log", getattr(settings, "debug", False))


def _engine_options() -> dict[str, Any]:
    options: dict[str, Any] = {"pool_pre_ping": True, "echo": ECHO_LOG}
    if _db_conf.is_sqlite:
        # SQLite 不支持 QueuePool 的大小参数，且连接需跨线程使用
        options["connect_args"] = {"check_same_thread": False}
        return options
    options.update(
        pool_size=POOL_SIZE,
        max_overflow=MAX_OVERFLOW,
        pool_recycle=POOL_RECYCLE,
    )
    return options


logger.info(
    "[DB] Init sync engine pool_size={} max_overflow={} recycle={}s",
    POOL_SIZE,
    MAX_OVERFLOW,
    POOL_RECYCLE,
)

engine = create_engine(_db_conf.sync_url, **_engine_options())

SessionFactory: sessionmaker[Session] = sessionmaker(
    bind=engine,
    class_=Session,
    autoflush=False,
    expire_on_commit=False,
)

# ----------------------------------------------------------------------------
#                              定义数据库会话依赖注入
# ----------------------------------------------------------------------------


def get_db() -> Iterator[Session]:
    """同步 Session 依赖，用于 `Depends(get_db)`"""
    with SessionFactory() as session:
        yield session


def init_db(bind: Engine | None = None) -> None:
    """根据已注册的 SQLModel 模型建表（已存在的表会跳过）"""
    # 导入模型以确保它们被注册到 metadata
    from ..features.demo.models import Demo  # noqa: F401

    SQLModel.metadata.create_all(bind or engine)


# ----------------------------------------------------------------------------
#                              事务边界
# ----------------------------------------------------------------------------


@contextmanager
def transactional(session: Session) -> Iterator[Session]:
    """写事务：块内无异常则提交，任何异常都回滚后原样抛出"""
    try:
        yield session
        session.commit()
    except Exception:
        logger.debug("[DB] Rolling back write transaction")
        session.rollback()
        raise


@contextmanager
def read_only(session: Session) -> Iterator[Session]:
    """只读事务：PostgreSQL 下声明 READ ONLY，结束时回滚，保证不落任何写入

    回滚前先把对象从 session 中分离，已加载的属性在块外仍可读取。
    """
    if session.get_bind().dialect.name == "postgresql":
        session.execute(text("SET TRANSACTION READ ONLY"))
    try:
        yield session
    finally:
        session.expunge_all()
        session.rollback()


# ----------------------------------------------------------------------------
#                             定义模块的“公开API”
# ----------------------------------------------------------------------------

__all__: Iterable[str] = (
    "engine",
    "SessionFactory",
    "get_db",
    "init_db",
    "transactional",
    "read_only",
)
