from typing import Optional
from asyncpg import Connection


class ManagerRepository:
    """Read access to managers plus the inserts used by bootstrap seeding."""

    def __init__(self, conn: Connection):
        self.conn = conn

    async def get_active_by_id(self, manager_id: str) -> Optional[dict]:
        sql = "SELECT * FROM managers WHERE manager_id = $1 AND is_active = TRUE;"
        record = await self.conn.fetchrow(sql, manager_id)
        return dict(record) if record else None

    async def count(self) -> int:
        sql = "SELECT COUNT(*) FROM managers;"
        total = await self.conn.fetchval(sql)
        return int(total or 0)

    async def list_active(self) -> list[dict]:
        sql = "SELECT * FROM managers WHERE is_active = TRUE ORDER BY manager_id;"
        records = await self.conn.fetch(sql)
        return [dict(record) for record in records]

    async def create(self, manager_id: str, is_active: bool = True) -> dict:
        sql = """
            INSERT INTO managers (manager_id, is_active)
            VALUES ($1, $2)
            RETURNING *;
        """
        record = await self.conn.fetchrow(sql, manager_id, is_active)
        return dict(record)
