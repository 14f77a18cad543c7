"""Tests for store snapshots.

(c) Mike Casale 2025.
Licensed under the MIT License.
"""

from __future__ import annotations as _annotations

import pytest
from pydantic import ValidationError

from inistore import InistoreSettings, Option, OptionStore, StoreSnapshot

__all__ = ()


@pytest.fixture
def populated(store: OptionStore) -> OptionStore:
    store.add_option("Width", "800", "window width")
    store.add_option("title", None)
    store.default_path = "app.ini"
    return store


class TestSnapshot:
    """Tests for taking and restoring snapshots."""

    def test_captures_options_in_order(self, populated: OptionStore) -> None:
        snapshot = populated.snapshot()

        assert snapshot.options == (Option("Width", "800", "window width"), Option("title"))
        assert snapshot.default_path == "app.ini"

    def test_is_detached(self, populated: OptionStore) -> None:
        """Later changes to the store do not leak into the snapshot."""
        snapshot = populated.snapshot()

        populated.set_option_value("width", "1024")

        assert snapshot.options[0].value == "800"

    def test_is_frozen(self, populated: OptionStore) -> None:
        snapshot = populated.snapshot()

        with pytest.raises(ValidationError):
            snapshot.default_path = "other.ini"  # type: ignore[misc]

    def test_json_round_trip(self, populated: OptionStore, settings: InistoreSettings) -> None:
        payload = populated.snapshot().model_dump_json()

        restored = OptionStore.from_snapshot(StoreSnapshot.model_validate_json(payload), settings=settings)

        assert restored.options() == populated.options()
        assert restored.default_path == populated.default_path
        assert restored.get_option("WIDTH").name == "Width"

    def test_from_snapshot_copies_options(self, populated: OptionStore) -> None:
        snapshot = populated.snapshot()

        restored = OptionStore.from_snapshot(snapshot)
        restored.set_option_value("width", "1024")

        assert snapshot.options[0].value == "800"

    def test_validation_trims_names(self) -> None:
        snapshot = StoreSnapshot.model_validate({"options": [{"name": "  Width "}]})

        assert snapshot.options[0].name == "Width"

    def test_validation_rejects_blank_names(self) -> None:
        with pytest.raises(ValueError, match="blank|null or empty"):
            StoreSnapshot.model_validate({"options": [{"name": "   "}]})
