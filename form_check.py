from __future__ import annotations

import argparse
import logging

from signup_form.core.config import settings
from signup_form.core.phone import format_phone
from signup_form.schemas.registration import RegistrationRecord
from signup_form.services.validation_service import validate

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Cadastro: verificação de máscara e validação")
    parser.add_argument("--phone", metavar="RAW", help="aplica a máscara de telefone")
    parser.add_argument(
        "--validate",
        nargs=5,
        metavar=("NAME", "EMAIL", "PHONE", "PASSWORD", "CONFIRMATION"),
        help="valida um cadastro completo",
    )
    args = parser.parse_args(argv)

    if args.phone is not None:
        print(format_phone(args.phone))

    if args.validate:
        name, email, phone, password, confirmation = args.validate
        result = validate(
            RegistrationRecord(
                name=name,
                email=email,
                phone=format_phone(phone),
                password=password,
                password_confirmation=confirmation,
            )
        )
        if result.is_valid:
            print("valid")
        else:
            for field, message in result.messages.items():
                print(f"{field}: {message}")
            return 1
    return 0


if __name__ == "__main__":
    logging.basicConfig(level=settings.log_level.upper(), format=LOG_FORMAT)
    raise SystemExit(main())
