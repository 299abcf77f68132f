import re
from typing import Callable, Optional, Sequence

from fastapi import Request

from user_registry.core.exceptions import MissingFieldException

MOBILE_PREFIX_RE = re.compile(r"^(?:\+91|0)")
MOBILE_RE = re.compile(r"[0-9]{10}")
PAN_RE = re.compile(r"[A-Z]{5}[0-9]{4}[A-Z]")


def validate_mobile(mob_num: Optional[str]) -> Optional[str]:
    """Strip a leading ``+91`` or a single ``0`` and return the 10 remaining digits.

    Returns ``None`` when the value is empty or does not normalise.
    """
    if not mob_num:
        return None
    cleaned = MOBILE_PREFIX_RE.sub("", mob_num, count=1)
    if not MOBILE_RE.fullmatch(cleaned):
        return None
    return cleaned


def validate_pan(pan_num: Optional[str]) -> Optional[str]:
    if not pan_num:
        return None
    pan_upper = pan_num.upper()
    if not PAN_RE.fullmatch(pan_upper):
        return None
    return pan_upper


async def is_manager_active(manager_repo, manager_id: Optional[str]) -> bool:
    # no manager means nothing to check
    if not manager_id:
        return True
    manager = await manager_repo.get_active_by_id(manager_id)
    return manager is not None


def check_required_fields(fields: Sequence[str]) -> Callable:
    """Build a dependency rejecting the request when a field is missing or empty.

    Fields are checked in order, the first missing one is named in the error.
    """
    async def dependency(request: Request) -> None:
        try:
            body = await request.json()
        except ValueError:
            body = {}
        if not isinstance(body, dict):
            body = {}
        for field in fields:
            if not body.get(field):
                raise MissingFieldException(field)

    return dependency
