from __future__ import annotations

from signup_form.services.form_service import FormController

_form_controller = FormController()


def get_form_controller() -> FormController:
    return _form_controller
