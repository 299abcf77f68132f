from datetime import datetime
from typing import Optional
from asyncpg import Connection


class UserRepository:
    """Repository for user rows, backed by asyncpg."""

    def __init__(self, conn: Connection):
        self.conn = conn

    # ------------------ Retrieval Methods ------------------ #

    async def get_by_id(self, user_id: str) -> Optional[dict]:
        sql = "SELECT * FROM users WHERE user_id = $1;"
        record = await self.conn.fetchrow(sql, user_id)
        return dict(record) if record else None

    async def get_active_by_id(self, user_id: str) -> Optional[dict]:
        sql = "SELECT * FROM users WHERE user_id = $1 AND is_active = TRUE;"
        record = await self.conn.fetchrow(sql, user_id)
        return dict(record) if record else None

    async def get_by_mobile(self, mob_num: str) -> Optional[dict]:
        # retired rows share the mobile of their successor, prefer the live one
        sql = """
            SELECT * FROM users
            WHERE mob_num = $1
            ORDER BY is_active DESC, created_at DESC
            LIMIT 1;
        """
        record = await self.conn.fetchrow(sql, mob_num)
        return dict(record) if record else None

    async def list_active(
        self,
        user_id: Optional[str] = None,
        mob_num: Optional[str] = None,
        manager_id: Optional[str] = None,
    ) -> list[dict]:
        clauses = ["is_active = TRUE"]
        args = []

        if user_id:
            clauses.append(f"user_id = ${len(args)+1}")
            args.append(user_id)
        elif mob_num:
            clauses.append(f"mob_num = ${len(args)+1}")
            args.append(mob_num)
        elif manager_id:
            clauses.append(f"manager_id = ${len(args)+1}")
            args.append(manager_id)

        sql = f"SELECT * FROM users WHERE {' AND '.join(clauses)} ORDER BY created_at;"
        records = await self.conn.fetch(sql, *args)
        return [dict(record) for record in records]

    # ------------------ Mutation Methods ------------------ #

    async def create(self, user_in: dict) -> dict:
        sql = """
            INSERT INTO users
            (user_id, full_name, mob_num, pan_num, manager_id, created_at, updated_at, is_active)
            VALUES ($1, $2, $3, $4, $5, $6, $7, TRUE)
            RETURNING *;
        """
        record = await self.conn.fetchrow(
            sql,
            user_in["user_id"],
            user_in["full_name"],
            user_in["mob_num"],
            user_in["pan_num"],
            user_in["manager_id"],
            user_in["created_at"],
            user_in["updated_at"],
        )
        return dict(record)

    async def update(self, user_id: str, fields: dict, updated_at: datetime) -> Optional[dict]:
        sql = """
            UPDATE users
            SET full_name = $1, mob_num = $2, pan_num = $3, manager_id = $4, updated_at = $5
            WHERE user_id = $6
            RETURNING *;
        """
        record = await self.conn.fetchrow(
            sql,
            fields["full_name"],
            fields["mob_num"],
            fields["pan_num"],
            fields["manager_id"],
            updated_at,
            user_id,
        )
        return dict(record) if record else None

    async def delete(self, user_id: str) -> None:
        sql = "DELETE FROM users WHERE user_id = $1;"
        await self.conn.execute(sql, user_id)

    async def reassign(self, old_user_id: str, successor: dict) -> dict:
        """Retire ``old_user_id`` and insert ``successor`` in one transaction."""
        async with self.conn.transaction():
            await self.conn.execute(
                "UPDATE users SET is_active = FALSE WHERE user_id = $1;", old_user_id
            )
            return await self.create(successor)
