"""User request/response schemas."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class User(BaseModel):
    """A user record keyed by email."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    email: str = ""
    first_name: str = Field(default="", alias="firstName")
    last_name: str = Field(default="", alias="lastName")

    @field_validator("email", "first_name", "last_name", mode="before")
    @classmethod
    def null_as_empty(cls, v: Any) -> Any:
        return "" if v is None else v

    def to_payload(self) -> dict[str, str]:
        return self.model_dump(by_alias=True)


class ErrorResponse(BaseModel):
    error: str
