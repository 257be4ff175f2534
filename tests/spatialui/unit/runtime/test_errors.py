from __future__ import annotations

from spatialui.runtime.errors import (
    DuplicateNodeKeyError,
    InvalidColorError,
    InvalidPresetError,
    PresetNotFoundError,
    SpatialUIError,
)


def test_error_hierarchy_matches_builtin_categories() -> None:
    assert issubclass(PresetNotFoundError, LookupError)
    assert issubclass(InvalidPresetError, ValueError)
    assert issubclass(InvalidColorError, ValueError)
    assert issubclass(DuplicateNodeKeyError, ValueError)
    for error_type in (PresetNotFoundError, InvalidPresetError, InvalidColorError, DuplicateNodeKeyError):
        assert issubclass(error_type, SpatialUIError)


def test_preset_not_found_message_names_the_preset() -> None:
    error = PresetNotFoundError("bogus")
    assert error.name == "bogus"
    assert "bogus" in str(error)
