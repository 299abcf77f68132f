import logging
import traceback
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, status

from user_registry.api.v1.deps import get_user_service
from user_registry.core.validators import check_required_fields
from user_registry.schemas.user_schema import (
    CreateUserIn,
    CreateUserOut,
    DeleteUserIn,
    MessageOut,
    UpdateUserIn,
    UserFilterIn,
    UserOut,
    UsersOut,
)
from user_registry.services.user_service import UserService

router = APIRouter(tags=["users"])

REQUIRED_CREATE_FIELDS = ["full_name", "mob_num", "pan_num", "manager_id"]


def internal_error(endpoint: str, e: Exception) -> HTTPException:
    logging.error(f"Error in /{endpoint}: {e}\n{traceback.format_exc()}")
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                         detail={"error": "Internal Server Error"})


@router.post(
    "/create_user",
    response_model=CreateUserOut,
    dependencies=[Depends(check_required_fields(REQUIRED_CREATE_FIELDS))],
)
async def create_user(
        body: CreateUserIn,
        user_service: UserService = Depends(get_user_service),
):
    try:
        user_id = await user_service.create_user(
            body.full_name,
            body.mob_num,
            body.pan_num,
            body.manager_id,
        )
        return CreateUserOut(message="User created successfully", user_id=user_id)
    except HTTPException:
        raise
    except Exception as e:
        raise internal_error("create_user", e)


@router.post("/get_users", response_model=UsersOut)
async def get_users(
        body: Optional[UserFilterIn] = None,
        user_service: UserService = Depends(get_user_service),
):
    body = body or UserFilterIn()
    try:
        users = await user_service.get_users(
            user_id=body.user_id,
            mob_num=body.mob_num,
            manager_id=body.manager_id,
        )
        return UsersOut(users=[UserOut.model_validate(user) for user in users])
    except HTTPException:
        raise
    except Exception as e:
        raise internal_error("get_users", e)


@router.get("/get_users", response_model=list[UserOut])
async def list_active_users(user_service: UserService = Depends(get_user_service)):
    try:
        users = await user_service.get_users()
        return [UserOut.model_validate(user) for user in users]
    except Exception as e:
        raise internal_error("get_users", e)


@router.post("/delete_user", response_model=MessageOut)
async def delete_user(
        body: Optional[DeleteUserIn] = None,
        user_service: UserService = Depends(get_user_service),
):
    body = body or DeleteUserIn()
    try:
        await user_service.delete_user(user_id=body.user_id, mob_num=body.mob_num)
        return MessageOut(message="User deleted successfully")
    except HTTPException:
        raise
    except Exception as e:
        raise internal_error("delete_user", e)


@router.post("/update_user", response_model=MessageOut)
async def update_user(
        body: Optional[UpdateUserIn] = None,
        user_service: UserService = Depends(get_user_service),
):
    body = body or UpdateUserIn()
    update_data = body.update_data.model_dump() if body.update_data is not None else None
    try:
        await user_service.update_users(body.user_ids, update_data)
        return MessageOut(message="User(s) updated successfully")
    except HTTPException:
        raise
    except Exception as e:
        raise internal_error("update_user", e)
