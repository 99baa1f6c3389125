"""Pydantic models for the ``candidates`` table.

Columns are stored in snake_case (``year_of_study``); the HTTP surface uses
the front-end's camelCase names (``yearOfStudy``).  ``id`` is assigned by the
database and is never accepted from clients.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class CandidateInput(BaseModel):
    """Payload for creating or updating a candidate; every field is optional."""
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    name: str | None = None
    role: str | None = None
    department: str | None = None
    year_of_study: str | int | float | None = Field(default=None, alias="yearOfStudy")
    photo: str | None = None

    def to_document(self) -> dict[str, Any]:
        """Return only the fields the caller actually supplied."""
        return self.model_dump(exclude_unset=True)


class Candidate(BaseModel):
    """Full candidate record returned from the database."""
    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str | None = None
    role: str | None = None
    department: str | None = None
    year_of_study: str | int | float | None = Field(default=None, alias="yearOfStudy")
    photo: str | None = None

    @classmethod
    def from_document(cls, row: dict[str, Any]) -> "Candidate":
        return cls.model_validate({**row, "id": str(row["id"])})
