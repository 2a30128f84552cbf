from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class FieldName(str, Enum):
    NAME = "name"
    EMAIL = "email"
    PHONE = "phone"
    PASSWORD = "password"
    PASSWORD_CONFIRMATION = "passwordConfirmation"


class RegistrationRecord(BaseModel):
    """Raw form values. Constraints live in the validation service."""

    name: str = ""
    email: str = ""
    phone: str = ""
    password: str = ""
    password_confirmation: str = Field(default="", alias="passwordConfirmation")

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    def value_of(self, field: FieldName) -> str:
        return getattr(self, _ATTRIBUTES[field])

    def with_value(self, field: FieldName, value: str) -> RegistrationRecord:
        return self.model_copy(update={_ATTRIBUTES[field]: value})


_ATTRIBUTES: dict[FieldName, str] = {
    FieldName.NAME: "name",
    FieldName.EMAIL: "email",
    FieldName.PHONE: "phone",
    FieldName.PASSWORD: "password",
    FieldName.PASSWORD_CONFIRMATION: "password_confirmation",
}


class PhoneFormatRequest(BaseModel):
    value: str = Field(default="", max_length=255)


class PhoneFormatResponse(BaseModel):
    formatted: str
    digits: str
    complete: bool


class ValidationResponse(BaseModel):
    valid: bool
    errors: dict[str, str]


class FieldChange(BaseModel):
    field: str = Field(..., max_length=50)
    value: str = Field(default="", max_length=255)


class FormStateRead(BaseModel):
    record: dict[str, str]
    errors: dict[str, str]
    is_submitting: bool
    submit_success: bool
