"""Authentication models: the verified caller and the admin login body."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class Principal(BaseModel):
    """Identity of an authenticated caller, derived per request, never stored."""
    model_config = ConfigDict(frozen=True)

    uid: str
    email: str | None = None
    claims: dict[str, Any] = Field(default_factory=dict)


class AdminCredentials(BaseModel):
    """Body of ``POST /admin-portal``.

    Fields are left untyped: a non-text value is a wrong credential, not a
    malformed request.
    """
    model_config = ConfigDict(populate_by_name=True)

    admin_name: Any = Field(default=None, alias="adminName")
    admin_password: Any = Field(default=None, alias="adminPassword")
