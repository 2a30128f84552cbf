"""Tests for the application module and packaging."""

from __future__ import annotations

import importlib
import logging
from pathlib import Path

import pytest

import signup_form.main


class TestApplicationModule:
    def test_import_leaves_root_logging_alone(self):
        """Importing the app must not install handlers or change the root level."""
        root = logging.getLogger()
        handlers = list(root.handlers)
        level = root.level

        importlib.reload(signup_form.main)

        assert root.handlers == handlers
        assert root.level == level

    def test_debug_tracebacks_disabled(self):
        assert signup_form.main.app.debug is False


class TestPackaging:
    def test_scripts_are_not_installed_as_modules(self):
        tomllib = pytest.importorskip("tomllib")
        pyproject = Path(__file__).resolve().parent.parent / "pyproject.toml"
        config = tomllib.loads(pyproject.read_text(encoding="utf-8"))

        setuptools_config = config.get("tool", {}).get("setuptools", {})
        assert "py-modules" not in setuptools_config
        assert setuptools_config["packages"]["find"]["include"] == ["signup_form*"]
