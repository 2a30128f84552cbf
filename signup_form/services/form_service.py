from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field, replace
from typing import Awaitable, Callable

from signup_form.core.config import settings
from signup_form.core.phone import format_phone
from signup_form.schemas.registration import FieldName, RegistrationRecord
from signup_form.services.validation_service import ValidationResult, validate

logger = logging.getLogger(__name__)

SubmitHandler = Callable[[RegistrationRecord], Awaitable[None]]


class SubmissionInProgressError(RuntimeError):
    pass


@dataclass(frozen=True)
class FormState:
    record: RegistrationRecord = field(default_factory=RegistrationRecord)
    errors: dict[str, str] = field(default_factory=dict)
    is_submitting: bool = False
    submit_success: bool = False


def handle_change(state: FormState, field_name: FieldName | str, value: str) -> FormState:
    try:
        target = FieldName(field_name)
    except ValueError as exc:
        raise ValueError(f"Campo desconhecido: {field_name}") from exc

    if target is FieldName.PHONE:
        value = format_phone(value)
    return replace(state, record=state.record.with_value(target, value))


async def simulated_submit(record: RegistrationRecord) -> None:
    await asyncio.sleep(settings.submit_delay_seconds)


class FormController:
    """Owns the in-memory form and runs the submit flow.

    ``submit_handler`` is awaited once per accepted submission. While it is
    pending ``state.is_submitting`` stays true and further submits are
    rejected; field changes are still applied.
    """

    def __init__(self, submit_handler: SubmitHandler | None = None) -> None:
        self._submit_handler = submit_handler or simulated_submit
        self.state = FormState()

    def change(self, field_name: FieldName | str, value: str) -> FormState:
        self.state = handle_change(self.state, field_name, value)
        return self.state

    def reset(self) -> FormState:
        self.state = FormState()
        return self.state

    async def submit(self) -> ValidationResult:
        if self.state.is_submitting:
            logger.warning("submission already in progress, resubmit rejected")
            raise SubmissionInProgressError("Envio já em andamento.")

        self.state = replace(self.state, is_submitting=True, submit_success=False)
        try:
            record = self.state.record
            result = validate(record)
            if not result.is_valid:
                self.state = replace(self.state, errors=result.messages)
                return result

            self.state = replace(self.state, errors={})
            try:
                await self._submit_handler(record)
            except Exception:
                logger.exception("registration submit failed (email=%s)", record.email)
                raise

            logger.info("registration submitted (name=%s, email=%s)", record.name, record.email)
            self.state = replace(self.state, record=RegistrationRecord(), submit_success=True)
            return result
        finally:
            self.state = replace(self.state, is_submitting=False)
