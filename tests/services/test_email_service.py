"""Tests for EmailService."""

from __future__ import annotations

from pathlib import Path

import pytest

from valkit.config.settings import ValkitSettings
from valkit.services.email import EmailService


class TestCheck:
    def test_valid(self, settings: ValkitSettings) -> None:
        result = EmailService(settings).check("sherlock@holmes.com")
        assert result.ok, result.error
        assert result.op == "check_email"
        assert result.data == {
            "value": "sherlock@holmes.com",
            "local_part": "sherlock",
            "domain_part": "holmes.com",
        }
        assert result.warnings == []

    def test_case_preserved(self, settings: ValkitSettings) -> None:
        result = EmailService(settings).check("Sherlock@Holmes.COM")
        assert result.data["value"] == "Sherlock@Holmes.COM"

    @pytest.mark.parametrize("raw", ["not-an-email", "a@b.c", ""])
    def test_invalid(self, settings: ValkitSettings, raw: str) -> None:
        result = EmailService(settings).check(raw)
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "INVALID_FORMAT"
        assert result.error.detail == {"value": raw}

    def test_long_address_warns(self, tmp_path: Path) -> None:
        (tmp_path / "valkit.toml").write_text("[email]\nwarn_length = 10\n")
        settings = ValkitSettings.from_cli(cwd=tmp_path)
        result = EmailService(settings).check("sherlock@holmes.com")
        assert result.ok
        assert len(result.warnings) == 1
        assert "19 characters" in result.warnings[0]

    def test_default_settings(self) -> None:
        assert EmailService().check("x@y.io").ok


class TestParts:
    def test_valid_address(self, settings: ValkitSettings) -> None:
        result = EmailService(settings).parts("sherlock@holmes.com")
        assert result.ok
        assert result.op == "email_parts"
        assert result.data == {
            "text": "sherlock@holmes.com",
            "local_part": "sherlock",
            "domain_part": "holmes.com",
            "valid": True,
        }
        assert result.warnings == []

    def test_unvalidated_text(self, settings: ValkitSettings) -> None:
        result = EmailService(settings).parts("a@b.c")
        assert result.ok
        assert result.data["domain_part"] == "b.c"
        assert result.data["valid"] is False

    def test_no_at(self, settings: ValkitSettings) -> None:
        result = EmailService(settings).parts("not-an-email")
        assert result.ok
        assert result.data["local_part"] == "not-an-email"
        assert result.data["domain_part"] is None
        assert result.warnings
