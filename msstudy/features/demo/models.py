"""Demo 模型：单字段 SQLModel 数据表"""
from sqlalchemy import BigInteger, Integer
from sqlmodel import SQLModel, Field

# 仅作声明，不参与任何缓存逻辑
CACHE_USAGE = "nonstrict-read-write"

# id 取值范围：64 位有符号整数
ID_MIN = -(2**63)
ID_MAX = 2**63 - 1

# SQLite 只有 INTEGER PRIMARY KEY 才是 rowid 别名，AUTOINCREMENT 也只能用在它上面
ID_TYPE = BigInteger().with_variant(Integer(), "sqlite")


class Demo(SQLModel, table=True):
    """示例实体表，同一性只由 id 决定"""

    __tablename__ = "demo"
    # 删除最大 id 后，SQLite 也不会把同一个 id 再分配出去
    __table_args__ = {"sqlite_autoincrement": True, "info": {"cache_usage": CACHE_USAGE}}

    id: int | None = Field(default=None, primary_key=True, sa_type=ID_TYPE)
    demofield: str | None = Field(default=None, description="示例文本字段")

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Demo):
            return False
        return self.id is not None and self.id == other.id

    def __hash__(self) -> int:
        # 插入后 id 才由数据库分配，哈希值不能随之变化
        return hash(Demo)

    def __str__(self) -> str:
        return f"Demo{{id={self.id}, demofield='{self.demofield}'}}"
