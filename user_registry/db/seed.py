# user_registry/db/seed.py
import asyncio
import random
import string
from faker import Faker
from tqdm import tqdm

from user_registry.core.config import settings
from user_registry.db.session import connect_db_pool, get_pool, close_db_pool
from user_registry.repositories.manager_repo import ManagerRepository
from user_registry.repositories.user_repo import UserRepository
from user_registry.services.manager_service import ManagerService
from user_registry.services.user_service import UserService

fake = Faker("en_IN")

NUM_USERS = 200
UNASSIGNED_RATIO = 0.1


def random_mobile() -> str:
    # mix the accepted input shapes so normalisation gets exercised
    digits = f"{random.randint(6, 9)}{random.randint(0, 999_999_999):09d}"
    return random.choice([digits, f"+91{digits}", f"0{digits}"])


def random_pan() -> str:
    letters = "".join(random.choices(string.ascii_uppercase, k=5))
    numbers = "".join(random.choices(string.digits, k=4))
    return f"{letters}{numbers}{random.choice(string.ascii_uppercase)}"


async def seed():
    await connect_db_pool()
    pool = await get_pool()
    if pool is None:
        raise RuntimeError("Database pool could not be initialized")

    async with pool.acquire() as conn:
        manager_repo = ManagerRepository(conn)
        created = await ManagerService(manager_repo).ensure_default_managers(settings.DEFAULT_MANAGER_COUNT)
        print(f"Managers created: {len(created)}")

        manager_ids = [m["manager_id"] for m in await manager_repo.list_active()]
        if not manager_ids:
            raise RuntimeError("No active managers available, aborting seed")

        user_service = UserService(UserRepository(conn), manager_repo)
        for _ in tqdm(range(NUM_USERS), desc="Creating users"):
            manager_id = None if random.random() < UNASSIGNED_RATIO else random.choice(manager_ids)
            await user_service.create_user(fake.name(), random_mobile(), random_pan(), manager_id)

        print("Seed complete.")

    await close_db_pool()


if __name__ == "__main__":
    asyncio.run(seed())
