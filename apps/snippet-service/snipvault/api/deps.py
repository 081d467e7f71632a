"""
API dependency helpers.

`get_current_user` is the authentication guard applied to every snippet
route; it resolves the proxy identity or fails with 401.
"""
import logging
from typing import Optional

from fastapi import Depends, Header, HTTPException, status
from sqlalchemy.orm import Session

from snipvault.api.auth import resolve_identity_from_headers, get_or_create_user
from snipvault.db import models
from snipvault.db.database import get_db
from snipvault.errors import Unauthorized
from snipvault.utils.runtime import dev_mode_active, DEV_USER_EMAIL, DEV_USER_NAME

logger = logging.getLogger(__name__)


def get_current_user(
    db: Session = Depends(get_db),
    x_auth_request_user: Optional[str] = Header(default=None),
    x_auth_request_email: Optional[str] = Header(default=None),
    x_forwarded_user: Optional[str] = Header(default=None),
    x_forwarded_email: Optional[str] = Header(default=None),
) -> models.User:
    try:
        is_dev_mode = dev_mode_active()
    except RuntimeError as exc:
        logger.error("DEV_MODE misconfiguration detected: %s", exc)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="DEV_MODE misconfigured")

    if is_dev_mode:
        email = DEV_USER_EMAIL
        name = DEV_USER_NAME
    else:
        name, email = resolve_identity_from_headers(
            x_auth_request_user=x_auth_request_user,
            x_auth_request_email=x_auth_request_email,
            x_forwarded_user=x_forwarded_user,
            x_forwarded_email=x_forwarded_email,
        )
        if not email:
            raise Unauthorized().to_http_exception()
    return get_or_create_user(db, email=email, display_name=name)
