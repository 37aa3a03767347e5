"""
Tests for the payload adapter.

Covers:
- Adapter caching and unsupported types.
- Default construction.
- Dumping to builtins and validating from builtins.
"""

from __future__ import annotations

import pytest

from opzioni import payload
from opzioni.errors import SerializationError
from tests.payloads import AppSettings, Opaque, Profile, RequiredSettings


class TestPayloadAdapter:
    """Tests for opzioni.payload."""

    def test_adapter_is_cached(self) -> None:
        assert payload.payload_adapter(AppSettings) is payload.payload_adapter(AppSettings)

    def test_unsupported_type(self) -> None:
        with pytest.raises(TypeError, match="Unsupported payload type"):
            payload.check_payload_type(Opaque)

    def test_default_value(self) -> None:
        assert payload.default_value(Profile) == Profile()
        assert payload.default_value(dict) == {}

    def test_default_value_missing(self) -> None:
        with pytest.raises(TypeError, match="no default"):
            payload.default_value(RequiredSettings)

    def test_to_builtins(self, sample_settings: AppSettings, sample_settings_dict: dict) -> None:
        assert payload.to_builtins(sample_settings, AppSettings) == sample_settings_dict

    def test_from_builtins(self, sample_settings: AppSettings, sample_settings_dict: dict) -> None:
        assert payload.from_builtins(sample_settings_dict, AppSettings) == sample_settings

    def test_from_builtins_invalid(self) -> None:
        with pytest.raises(SerializationError, match="retries"):
            payload.from_builtins({"retries": "many"}, AppSettings)
