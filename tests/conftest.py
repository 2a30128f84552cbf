from __future__ import annotations

import pytest

from signup_form.schemas.registration import RegistrationRecord

VALID_FIELDS = {
    "name": "Maria Silva",
    "email": "maria.silva@gmail.com",
    "phone": "(11) 98765-4321",
    "password": "segredo123",
    "passwordConfirmation": "segredo123",
}


@pytest.fixture
def valid_record() -> RegistrationRecord:
    return RegistrationRecord.model_validate(VALID_FIELDS)


async def instant_submit(record: RegistrationRecord) -> None:
    return None
