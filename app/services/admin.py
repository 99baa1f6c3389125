"""Static admin credential check.

A plain equality comparison against the two configured secrets.  Submitted
and expected values are logged redacted only.
"""

from __future__ import annotations

import logging

from app.core.config import Settings
from app.core.errors import Unauthorized
from app.core.logging import redact
from app.models.auth import AdminCredentials

logger = logging.getLogger(__name__)


def check_admin_credentials(credentials: AdminCredentials, settings: Settings) -> None:
    """Raise ``Unauthorized`` unless both fields match the configured secrets.

    Empty strings count as missing.
    """
    logger.info(
        "admin_credentials_received",
        extra={
            "admin_name": redact(credentials.admin_name),
            "admin_password": redact(credentials.admin_password),
            "expected_admin_name": redact(settings.ADMIN_NAME),
            "expected_admin_password": redact(settings.ADMIN_PASSWORD),
        },
    )

    if not credentials.admin_name or not credentials.admin_password:
        raise Unauthorized(Unauthorized.ADMIN_REQUIRED)

    if (
        credentials.admin_name == settings.ADMIN_NAME
        and credentials.admin_password == settings.ADMIN_PASSWORD
    ):
        logger.info("admin_credentials_valid")
        return

    logger.warning("admin_credentials_invalid")
    raise Unauthorized(Unauthorized.INVALID_ADMIN)
