import logging
import uuid

from user_registry.repositories.manager_repo import ManagerRepository

logger = logging.getLogger(__name__)


class ManagerService:
    def __init__(self, manager_repo: ManagerRepository):
        self.manager_repo = manager_repo

    async def ensure_default_managers(self, count: int) -> list[dict]:
        """Insert ``count`` active managers when the table is empty.

        Returns the created managers, or an empty list when managers already exist.
        """
        if await self.manager_repo.count() > 0:
            return []

        created = []
        for _ in range(count):
            created.append(await self.manager_repo.create(str(uuid.uuid4()), is_active=True))
        logger.info("Seeded %d default managers", len(created))
        return created
