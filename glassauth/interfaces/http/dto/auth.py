from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator


class LoginFormDTO(BaseModel):
    email: str = Field("", max_length=255)
    password: str = Field("", max_length=128)  # no strength check on login

    model_config = ConfigDict(extra="ignore")


class RegisterFormDTO(BaseModel):
    email: str = Field("", max_length=255)
    password: str = Field("", max_length=128)
    confirm_password: str = Field("", max_length=128)
    phone: str | None = Field(None, max_length=20)

    model_config = ConfigDict(extra="ignore")

    @field_validator("phone", mode="before")
    @classmethod
    def _blank_phone_is_none(cls, value: str | None) -> str | None:
        if value is None:
            return None
        value = str(value).strip()
        return value or None
