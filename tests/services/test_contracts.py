"""Tests for ServiceResult payload contracts."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from valkit.services.contracts import DayItem, DayListData, EmailPartsData, dump_validated


class TestDumpValidated:
    def test_round_trips_plain_dict(self) -> None:
        data = dump_validated(DayItem, {"index": 3, "name": "Wednesday"})
        assert data == {"index": 3, "name": "Wednesday"}

    def test_nested_models_become_dicts(self) -> None:
        data = dump_validated(
            DayListData,
            {"items": [{"index": 0, "name": "Sunday"}], "count": 1},
        )
        assert data["items"] == [{"index": 0, "name": "Sunday"}]

    def test_rejects_out_of_range_index(self) -> None:
        with pytest.raises(ValidationError):
            dump_validated(DayItem, {"index": 7, "name": "Nope"})

    def test_optional_domain_part(self) -> None:
        data = dump_validated(
            EmailPartsData,
            {"text": "x", "local_part": "x", "domain_part": None, "valid": False},
        )
        assert data["domain_part"] is None
