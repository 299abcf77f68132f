from fastapi import Depends
from asyncpg import Connection

from user_registry.db.session import get_db_connection
from user_registry.repositories.manager_repo import ManagerRepository
from user_registry.repositories.user_repo import UserRepository
from user_registry.services.user_service import UserService


def get_user_repo(conn: Connection = Depends(get_db_connection)) -> UserRepository:
    return UserRepository(conn)

def get_manager_repo(conn: Connection = Depends(get_db_connection)) -> ManagerRepository:
    return ManagerRepository(conn)

def get_user_service(
        user_repo: UserRepository = Depends(get_user_repo),
        manager_repo: ManagerRepository = Depends(get_manager_repo),
) -> UserService:
    return UserService(user_repo, manager_repo)
