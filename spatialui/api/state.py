"""Public parameter-state API contracts."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Protocol

from spatialui.api.events import Subscription

if TYPE_CHECKING:
    from spatialui.state.param_store import ParamListener, ParamSnapshot, ParamValue


class ParamStorePort(Protocol):
    """Fixed-key parameter store with whole-set notifications."""

    def keys(self) -> tuple[str, ...]:
        """Return parameter names in declaration order."""

    def get(self) -> Mapping[str, "ParamValue"]:
        """Return read-only current values."""

    def snapshot(self) -> "ParamSnapshot":
        """Return values with their revision."""

    def set(self, update: Mapping[str, "ParamValue"]) -> None:
        """Merge known keys and notify listeners with the full set."""

    def subscribe(self, listener: "ParamListener") -> Subscription:
        """Register a change listener."""

    def unsubscribe(self, subscription: Subscription) -> None:
        """Remove a change listener."""


def create_param_store(initial: Mapping[str, "ParamValue"] | None = None) -> ParamStorePort:
    """Create a store seeded with ``initial`` or the sphere-scene defaults."""
    from spatialui.scene.builder import DEFAULT_PARAMS
    from spatialui.state.controls import DEFAULT_CONTROLS, color_keys
    from spatialui.state.param_store import ParamStore

    return ParamStore(
        DEFAULT_PARAMS if initial is None else initial,
        color_keys=color_keys(DEFAULT_CONTROLS),
    )
