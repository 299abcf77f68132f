from fastapi import FastAPI
from contextlib import asynccontextmanager
from user_registry.api.v1 import routers
import logging
from user_registry.core.config import settings
from user_registry.db.session import connect_db_pool, close_db_pool, get_pool
from user_registry.repositories.manager_repo import ManagerRepository
from user_registry.services.manager_service import ManagerService

logging.basicConfig(level=settings.LOG_LEVEL)

@asynccontextmanager
async def lifespan(app: FastAPI):
    await connect_db_pool()
    pool = await get_pool()
    async with pool.acquire() as conn:
        await ManagerService(ManagerRepository(conn)).ensure_default_managers(
            settings.DEFAULT_MANAGER_COUNT
        )
    yield
    await close_db_pool()

app = FastAPI(
    title="User Registry API",
    description="Users owned by managers, with mobile/PAN validation",
    version="1.0.0",
    lifespan=lifespan
)

app.include_router(routers.router)

@app.get("/")
async def root():
    return {"message": "Welcome to User Registry API"}
