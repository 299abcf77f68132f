# user_registry/services/user_service.py

import logging
import uuid
from datetime import datetime, timezone
from typing import Optional

from user_registry.core.exceptions import (
    InvalidManagerException,
    InvalidMobileException,
    InvalidPanException,
    MissingLocatorException,
    MissingUpdatePayloadException,
    UserNotFoundException,
)
from user_registry.core.validators import is_manager_active, validate_mobile, validate_pan
from user_registry.repositories.manager_repo import ManagerRepository
from user_registry.repositories.user_repo import UserRepository

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = ("full_name", "mob_num", "pan_num", "manager_id")


def _now() -> datetime:
    return datetime.now(timezone.utc)


class UserService:
    def __init__(self, user_repo: UserRepository, manager_repo: ManagerRepository):
        self.user_repo = user_repo
        self.manager_repo = manager_repo

    async def create_user(self, full_name: str, mob_num: str, pan_num: str,
                          manager_id: Optional[str]) -> str:
        valid_mob = validate_mobile(mob_num)
        if not valid_mob:
            raise InvalidMobileException()
        valid_pan = validate_pan(pan_num)
        if not valid_pan:
            raise InvalidPanException()
        if not await is_manager_active(self.manager_repo, manager_id):
            raise InvalidManagerException()

        timestamp = _now()
        user = await self.user_repo.create({
            "user_id": str(uuid.uuid4()),
            "full_name": full_name,
            "mob_num": valid_mob,
            "pan_num": valid_pan,
            "manager_id": manager_id,
            "created_at": timestamp,
            "updated_at": timestamp,
        })
        logger.info("Created user %s (manager=%s)", user["user_id"], manager_id)
        return user["user_id"]

    async def get_users(self, user_id: Optional[str] = None, mob_num: Optional[str] = None,
                        manager_id: Optional[str] = None) -> list[dict]:
        if user_id:
            return await self.user_repo.list_active(user_id=user_id)
        if mob_num:
            valid_mob = validate_mobile(mob_num)
            if not valid_mob:
                return []
            return await self.user_repo.list_active(mob_num=valid_mob)
        if manager_id:
            return await self.user_repo.list_active(manager_id=manager_id)
        return await self.user_repo.list_active()

    async def delete_user(self, user_id: Optional[str] = None, mob_num: Optional[str] = None) -> None:
        if not user_id and not mob_num:
            raise MissingLocatorException()

        if user_id:
            user = await self.user_repo.get_by_id(user_id)
        else:
            valid_mob = validate_mobile(mob_num)
            user = await self.user_repo.get_by_mobile(valid_mob) if valid_mob else None

        if user is None:
            raise UserNotFoundException()

        await self.user_repo.delete(user["user_id"])
        logger.info("Deleted user %s", user["user_id"])

    async def update_users(self, user_ids: Optional[list[str]], update_data: Optional[dict]) -> None:
        """Apply ``update_data`` to each id in turn.

        Ids without an active row are skipped. An invalid ``manager_id`` stops
        the batch; ids handled before it keep their changes.
        """
        if user_ids is None or update_data is None:
            raise MissingUpdatePayloadException()

        full_name = update_data.get("full_name")
        mob_num = validate_mobile(update_data.get("mob_num"))
        pan_num = validate_pan(update_data.get("pan_num"))
        manager_id = update_data.get("manager_id")

        for user_id in user_ids:
            user = await self.user_repo.get_active_by_id(user_id)
            if user is None:
                logger.debug("Skipping update for unknown or inactive user %s", user_id)
                continue

            merged = {
                "full_name": full_name or user["full_name"],
                "mob_num": mob_num or user["mob_num"],
                "pan_num": pan_num or user["pan_num"],
                "manager_id": manager_id or user["manager_id"],
            }

            if manager_id:
                if not await is_manager_active(self.manager_repo, manager_id):
                    raise InvalidManagerException("Invalid manager_id")

                if user["manager_id"] and user["manager_id"] != manager_id:
                    timestamp = _now()
                    successor = await self.user_repo.reassign(user_id, {
                        "user_id": str(uuid.uuid4()),
                        **merged,
                        "created_at": timestamp,
                        "updated_at": timestamp,
                    })
                    logger.info("Reassigned user %s from manager %s to %s as %s",
                                user_id, user["manager_id"], manager_id, successor["user_id"])
                    continue

            await self.user_repo.update(user_id, merged, updated_at=_now())
