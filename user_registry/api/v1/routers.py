# user_registry/api/v1/routers.py
from fastapi import APIRouter
from user_registry.api.v1.endpoints import users

router = APIRouter()

router.include_router(users.router)
