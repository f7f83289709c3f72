from typing import Optional
from fastapi import Query, Request
from drivesafe.core.config import settings


def get_current_user_id(
    request: Request,
    user_id: Optional[str] = Query(
        None,
        alias="userId",
        description="User the request acts for; ignored when the request is authenticated"
    )
) -> str:
    """
    FastAPI dependency resolving the acting user.

    An identity attached to request.state by an auth layer wins, then the
    userId query parameter, then the configured default user.
    """
    user = getattr(request.state, "user", None)
    if user is not None:
        return str(getattr(user, "id", user))
    if user_id:
        return user_id
    return settings.DEFAULT_USER_ID
