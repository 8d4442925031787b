"""Demo 服务层：委托仓储，只负责事务划分"""
from __future__ import annotations

from loguru import logger

from ...core.database_sync import read_only, transactional
from .models import Demo
from .repository import DemoRepository, SortOrder


class DemoService:
    def __init__(self, repository: DemoRepository):
        self.repository = repository

    @property
    def session(self):
        return self.repository.session

    def save(self, demo: Demo) -> Demo:
        """保存 Demo，失败时整体回滚"""
        logger.debug("Request to save Demo : {}", demo)
        with transactional(self.session):
            return self.repository.save(demo)

    def find_all(self, sort: SortOrder | None = None) -> list[Demo]:
        logger.debug("Request to get all Demos")
        with read_only(self.session):
            return self.repository.find_all(sort)

    def find_one(self, demo_id: int) -> Demo | None:
        logger.debug("Request to get Demo : {}", demo_id)
        with read_only(self.session):
            return self.repository.find_by_id(demo_id)

    def delete(self, demo_id: int) -> None:
        logger.debug("Request to delete Demo : {}", demo_id)
        with transactional(self.session):
            self.repository.delete_by_id(demo_id)
