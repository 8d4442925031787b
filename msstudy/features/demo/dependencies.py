"""Demo 依赖：每个请求显式组装 Session → Repository → Service"""
from fastapi import Depends
from sqlmodel import Session

from ...core.database_sync import get_db
from .repository import DemoRepository
from .service import DemoService


def get_demo_repository(db: Session = Depends(get_db)) -> DemoRepository:
    return DemoRepository(db)


def get_demo_service(repository: DemoRepository = Depends(get_demo_repository)) -> DemoService:
    return DemoService(repository)
