from __future__ import annotations

import re

PHONE_MASK_LENGTH = 15

_NON_DIGIT = re.compile(r"\D", re.ASCII)
_AREA_CODE = re.compile(r"^(\d{2})(\d)", re.ASCII)
_LOCAL_SPLIT = re.compile(r"(\d{5})(\d)", re.ASCII)


def phone_digits(phone: str | None) -> str:
    if not phone:
        return ""
    return _NON_DIGIT.sub("", phone)


def format_phone(phone: str | None) -> str:
    """Mask raw keystrokes as ``(DD) DDDDD-DDDD``.

    Non-digits are dropped first, so feeding an already masked value back in
    returns it unchanged. Partial input is masked as far as it goes and the
    result never exceeds ``PHONE_MASK_LENGTH`` characters.
    """
    digits = phone_digits(phone)
    masked = _AREA_CODE.sub(r"(\1) \2", digits, count=1)
    masked = _LOCAL_SPLIT.sub(r"\1-\2", masked, count=1)
    return masked[:PHONE_MASK_LENGTH]


def is_complete_phone(phone: str | None) -> bool:
    if not phone:
        return False
    return len(format_phone(phone)) == PHONE_MASK_LENGTH
