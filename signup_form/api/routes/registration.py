from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException, status

from signup_form.api.deps import get_form_controller
from signup_form.core.phone import format_phone, is_complete_phone, phone_digits
from signup_form.schemas.registration import (
    FieldChange,
    FormStateRead,
    PhoneFormatRequest,
    PhoneFormatResponse,
    ValidationResponse,
)
from signup_form.services.form_service import FormController, FormState, SubmissionInProgressError
from signup_form.services.validation_service import validate_payload

router = APIRouter(prefix="/registration", tags=["registration"])


def _to_read(state: FormState) -> FormStateRead:
    return FormStateRead(
        record=state.record.model_dump(by_alias=True),
        errors=state.errors,
        is_submitting=state.is_submitting,
        submit_success=state.submit_success,
    )


@router.post("/phone/format", response_model=PhoneFormatResponse)
async def format_phone_endpoint(payload: PhoneFormatRequest):
    formatted = format_phone(payload.value)
    return PhoneFormatResponse(
        formatted=formatted,
        digits=phone_digits(formatted),
        complete=is_complete_phone(formatted),
    )


@router.post("/validate", response_model=ValidationResponse)
async def validate_endpoint(payload: dict[str, Any] = Body(...)):
    result = validate_payload(payload)
    return ValidationResponse(valid=result.is_valid, errors=result.messages)


@router.get("/form", response_model=FormStateRead)
async def read_form(controller: FormController = Depends(get_form_controller)):
    return _to_read(controller.state)


@router.patch("/form", response_model=FormStateRead)
async def change_form_field(
    payload: FieldChange,
    controller: FormController = Depends(get_form_controller),
):
    try:
        state = controller.change(payload.field, payload.value)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return _to_read(state)


@router.post("/form/submit", response_model=FormStateRead)
async def submit_form(controller: FormController = Depends(get_form_controller)):
    try:
        await controller.submit()
    except SubmissionInProgressError as exc:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc)) from exc
    return _to_read(controller.state)


@router.post("/form/reset", response_model=FormStateRead)
async def reset_form(controller: FormController = Depends(get_form_controller)):
    return _to_read(controller.reset())
