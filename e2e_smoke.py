from __future__ import annotations

import logging

from fastapi.testclient import TestClient

from signup_form.api import deps
from signup_form.core.config import settings
from signup_form.main import app
from signup_form.services.form_service import FormController


async def _instant_submit(record) -> None:
    return None


def run_smoke() -> None:
    controller = FormController(submit_handler=_instant_submit)
    app.dependency_overrides[deps.get_form_controller] = lambda: controller
    client = TestClient(app)
    client.get("/health/ping").raise_for_status()

    for field, value in (
        ("name", "Maria Silva"),
        ("email", "maria.silva@gmail.com"),
        ("phone", "11987654321"),
        ("password", "segredo123"),
        ("passwordConfirmation", "segredo123"),
    ):
        client.patch("/registration/form", json={"field": field, "value": value}).raise_for_status()

    resp = client.post("/registration/form/submit")
    resp.raise_for_status()
    print("Smoke test completed. success=", resp.json().get("submit_success"))


if __name__ == "__main__":
    logging.basicConfig(level=settings.log_level.upper(), format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    run_smoke()
