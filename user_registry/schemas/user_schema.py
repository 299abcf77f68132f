from datetime import datetime
from typing import Optional
from pydantic import BaseModel


class CreateUserIn(BaseModel):
    # presence is enforced by check_required_fields so a missing field is a 400
    full_name: Optional[str] = None
    mob_num: Optional[str] = None
    pan_num: Optional[str] = None
    manager_id: Optional[str] = None


class CreateUserOut(BaseModel):
    message: str
    user_id: str


class UserFilterIn(BaseModel):
    user_id: Optional[str] = None
    mob_num: Optional[str] = None
    manager_id: Optional[str] = None


class DeleteUserIn(BaseModel):
    user_id: Optional[str] = None
    mob_num: Optional[str] = None


class UpdateData(BaseModel):
    full_name: Optional[str] = None
    mob_num: Optional[str] = None
    pan_num: Optional[str] = None
    manager_id: Optional[str] = None


class UpdateUserIn(BaseModel):
    user_ids: Optional[list[str]] = None
    update_data: Optional[UpdateData] = None


class UserOut(BaseModel):
    user_id: str
    full_name: str
    mob_num: str
    pan_num: str
    manager_id: Optional[str] = None
    created_at: datetime
    updated_at: datetime
    is_active: bool


class UsersOut(BaseModel):
    users: list[UserOut]


class MessageOut(BaseModel):
    message: str
