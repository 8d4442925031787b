"""Demo schemas：请求 / 响应 Pydantic 模型"""
from sqlmodel import SQLModel, Field

from .models import ID_MAX, ID_MIN


class DemoPayload(SQLModel):
    """请求体：新建时 id 必须为空，更新时 id 必须存在，由路由层校验"""

    id: int | None = Field(default=None, ge=ID_MIN, le=ID_MAX)
    demofield: str | None = Field(default=None, description="示例文本字段")


class DemoRead(SQLModel):
    id: int | None = None
    demofield: str | None = None
