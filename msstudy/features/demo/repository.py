"""Demo 仓储：对 demo 表的单行存取，不负责事务边界"""
from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import func
from sqlmodel import Session, select

from ...core.exceptions import EntityNotFoundError
from .models import Demo

ENTITY_NAME = "Demo"

# 允许排序的列
SORTABLE_COLUMNS = {
    "id": Demo.id,
    "demofield": Demo.demofield,
}

SortOrder = Sequence[tuple[str, bool]]


class DemoRepository:
    """按 id 存取 Demo，所有写操作只 flush，由调用方提交或回滚"""

    def __init__(self, session: Session):
        self.session = session

    def save(self, demo: Demo) -> Demo:
        """id 为空时插入并由数据库分配 id；否则更新同 id 的行，行不存在则抛 EntityNotFoundError"""
        if demo.id is None:
            self.session.add(demo)
            self.session.flush()
            self.session.refresh(demo)
            return demo

        existing = self.session.get(Demo, demo.id)
        if existing is None:
            raise EntityNotFoundError(ENTITY_NAME, demo.id)
        existing.demofield = demo.demofield
        self.session.add(existing)
        self.session.flush()
        return existing

    def find_all(self, sort: SortOrder | None = None) -> list[Demo]:
        statement = select(Demo)
        order_by = []
        for field, descending in sort or ():
            column = SORTABLE_COLUMNS.get(field)
            if column is None:
                continue
            order_by.append(column.desc() if descending else column.asc())
        statement = statement.order_by(*(order_by or [Demo.id]))
        return list(self.session.exec(statement).all())

    def find_by_id(self, demo_id: int) -> Demo | None:
        return self.session.get(Demo, demo_id)

    def delete_by_id(self, demo_id: int) -> None:
        demo = self.find_by_id(demo_id)
        if demo is None:
            return
        self.session.delete(demo)
        self.session.flush()

    def count(self) -> int:
        return self.session.exec(select(func.count()).select_from(Demo)).one()
