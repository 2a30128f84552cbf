from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Mapping, Optional

from email_validator import EmailNotValidError, validate_email

from signup_form.core.phone import PHONE_MASK_LENGTH
from signup_form.schemas.registration import FieldName, RegistrationRecord

logger = logging.getLogger(__name__)

NAME_MIN_LENGTH = 3
PASSWORD_MIN_LENGTH = 6


class ErrorCode(str, Enum):
    REQUIRED = "REQUIRED"
    TOO_SHORT = "TOO_SHORT"
    INVALID_FORMAT = "INVALID_FORMAT"
    MISMATCH = "MISMATCH"


@dataclass(frozen=True)
class FieldError:
    field: FieldName
    code: ErrorCode
    message: str


@dataclass
class ValidationResult:
    errors: dict[FieldName, FieldError] = field(default_factory=dict)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    @property
    def messages(self) -> dict[str, str]:
        return {name.value: error.message for name, error in self.errors.items()}


# A check looks at one field value; the record is passed along for
# cross-field rules.
Check = Callable[[str, RegistrationRecord], Optional[ErrorCode]]


def _required(value: str, record: RegistrationRecord) -> ErrorCode | None:
    return ErrorCode.REQUIRED if value == "" else None


def _min_length(length: int) -> Check:
    def _check(value: str, record: RegistrationRecord) -> ErrorCode | None:
        return ErrorCode.TOO_SHORT if len(value) < length else None

    return _check


# Single-label and .test domains pass; the local part must be ASCII.
def _email_syntax(value: str, record: RegistrationRecord) -> ErrorCode | None:
    try:
        validate_email(
            value,
            check_deliverability=False,
            allow_smtputf8=False,
            globally_deliverable=False,
            test_environment=True,
        )
    except EmailNotValidError:
        return ErrorCode.INVALID_FORMAT
    return None


def _matches_password(value: str, record: RegistrationRecord) -> ErrorCode | None:
    return ErrorCode.MISMATCH if value != record.password else None


@dataclass(frozen=True)
class FieldRule:
    """Ordered checks for one field; the first failing check is reported."""

    field: FieldName
    checks: tuple[Check, ...]
    messages: Mapping[ErrorCode, str]

    def evaluate(self, record: RegistrationRecord) -> FieldError | None:
        value = record.value_of(self.field)
        for check in self.checks:
            code = check(value, record)
            if code is not None:
                return FieldError(field=self.field, code=code, message=self.messages[code])
        return None


REGISTRATION_RULES: tuple[FieldRule, ...] = (
    FieldRule(
        field=FieldName.NAME,
        checks=(_required, _min_length(NAME_MIN_LENGTH)),
        messages={
            ErrorCode.REQUIRED: "Nome é obrigatório",
            ErrorCode.TOO_SHORT: "Nome deve ter pelo menos 3 caracteres",
        },
    ),
    FieldRule(
        field=FieldName.EMAIL,
        checks=(_required, _email_syntax),
        messages={
            ErrorCode.REQUIRED: "E-mail é obrigatório",
            ErrorCode.INVALID_FORMAT: "Digite um e-mail válido",
        },
    ),
    FieldRule(
        field=FieldName.PHONE,
        checks=(_required, _min_length(PHONE_MASK_LENGTH)),
        messages={
            ErrorCode.REQUIRED: "Telefone é obrigatório",
            ErrorCode.TOO_SHORT: "Telefone incompleto",
        },
    ),
    FieldRule(
        field=FieldName.PASSWORD,
        checks=(_required, _min_length(PASSWORD_MIN_LENGTH)),
        messages={
            ErrorCode.REQUIRED: "Senha é obrigatória",
            ErrorCode.TOO_SHORT: "Senha deve ter pelo menos 6 caracteres",
        },
    ),
    FieldRule(
        field=FieldName.PASSWORD_CONFIRMATION,
        checks=(_required, _matches_password),
        messages={
            ErrorCode.REQUIRED: "Confirmação de senha é obrigatória",
            ErrorCode.MISMATCH: "Senhas não conferem",
        },
    ),
)


def validate(
    record: RegistrationRecord,
    rules: tuple[FieldRule, ...] = REGISTRATION_RULES,
) -> ValidationResult:
    """Run every field rule against ``record`` and collect one error per field.

    All rules are evaluated even after a failure so the caller can show every
    invalid field at once. Errors keep the declaration order of ``rules``.
    """
    result = ValidationResult()
    for rule in rules:
        error = rule.evaluate(record)
        if error is not None:
            result.errors[rule.field] = error
    if not result.is_valid:
        logger.debug("registration rejected (fields=%s)", [name.value for name in result.errors])
    return result


def validate_payload(data: Mapping[str, Any]) -> ValidationResult:
    values = {key: "" if value is None else str(value) for key, value in data.items()}
    return validate(RegistrationRecord.model_validate(values))
