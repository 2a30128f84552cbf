"""Tests for the root-level helper scripts."""

from __future__ import annotations

from signup_form.api import deps
from signup_form.main import app

import e2e_smoke
import form_check


class TestFormCheck:
    def test_phone(self, capsys):
        assert form_check.main(["--phone", "11987654321"]) == 0
        assert capsys.readouterr().out.strip() == "(11) 98765-4321"

    def test_validate_valid(self, capsys):
        code = form_check.main(
            ["--validate", "Maria Silva", "maria.silva@gmail.com", "11987654321", "segredo123", "segredo123"]
        )
        assert code == 0
        assert capsys.readouterr().out.strip() == "valid"

    def test_validate_invalid(self, capsys):
        code = form_check.main(["--validate", "Al", "maria", "119", "segredo123", "outrasenha"])
        assert code == 1
        out = capsys.readouterr().out
        assert "name: Nome deve ter pelo menos 3 caracteres" in out
        assert "email: Digite um e-mail válido" in out
        assert "phone: Telefone incompleto" in out
        assert "passwordConfirmation: Senhas não conferem" in out
        assert "password:" not in out.replace("passwordConfirmation:", "")


class TestSmoke:
    def test_run_smoke(self, capsys):
        try:
            e2e_smoke.run_smoke()
        finally:
            app.dependency_overrides.pop(deps.get_form_controller, None)
        assert "success= True" in capsys.readouterr().out
