"""Reactive fixed-key parameter store."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Literal, TypeAlias

from spatialui.api.events import Subscription
from spatialui.runtime.errors import InvalidColorError
from spatialui.scene.color import is_color

_LOG = logging.getLogger(__name__)

ParamValue: TypeAlias = float | int | bool | str
ParamFamily: TypeAlias = Literal["boolean", "color", "number", "text", "any"]


@dataclass(frozen=True, slots=True)
class ParamSnapshot:
    """Full parameter set at one revision."""

    values: Mapping[str, ParamValue]
    revision: int

    def __getitem__(self, key: str) -> ParamValue:
        return self.values[key]


ParamListener = Callable[[ParamSnapshot], None]


class ParamStore:
    """Ordered parameter mapping with whole-set change notifications.

    Keys are fixed at construction. ``set`` merges known keys and then calls
    every listener synchronously with the complete resulting set.

    Keys named in ``color_keys`` take ``#rrggbb`` text or 24-bit ints whatever
    their starting representation; other families are inferred from the
    initial values.
    """

    def __init__(
        self,
        initial: Mapping[str, ParamValue],
        *,
        color_keys: Iterable[str] = (),
    ) -> None:
        self._values: dict[str, ParamValue] = dict(initial)
        self._families: dict[str, ParamFamily] = {
            key: _family_of(value) for key, value in self._values.items()
        }
        for key in color_keys:
            if key not in self._values:
                continue
            if not is_color(self._values[key]):
                raise InvalidColorError(f"Invalid initial color for {key!r}: {self._values[key]!r}")
            self._families[key] = "color"
        self._revision = 0
        self._next_id = 1
        self._listeners: dict[int, ParamListener] = {}

    def keys(self) -> tuple[str, ...]:
        return tuple(self._values)

    def get(self) -> Mapping[str, ParamValue]:
        """Return a read-only copy of the current values."""
        return MappingProxyType(dict(self._values))

    def snapshot(self) -> ParamSnapshot:
        return ParamSnapshot(values=self.get(), revision=self._revision)

    def revision(self) -> int:
        return self._revision

    def set(self, update: Mapping[str, ParamValue]) -> None:
        for key, value in update.items():
            if key not in self._values:
                _LOG.debug("param_store_unknown_key key=%s", key)
                continue
            if not _accepts(self._families[key], value):
                _LOG.warning("param_store_rejected_value key=%s value=%r", key, value)
                continue
            self._values[key] = value
        self._revision += 1
        snapshot = self.snapshot()
        for listener in tuple(self._listeners.values()):
            listener(snapshot)

    def subscribe(self, listener: ParamListener) -> Subscription:
        sub_id = self._next_id
        self._next_id += 1
        self._listeners[sub_id] = listener
        return Subscription(sub_id)

    def unsubscribe(self, subscription: Subscription) -> None:
        self._listeners.pop(subscription.id, None)


def _family_of(value: object) -> ParamFamily:
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, str):
        return "color" if value.startswith("#") and is_color(value) else "text"
    if isinstance(value, (int, float)):
        return "number"
    return "any"


def _accepts(family: ParamFamily, candidate: object) -> bool:
    if family == "boolean":
        return isinstance(candidate, bool)
    if family == "color":
        # Color slots take #rrggbb text or pre-parsed ints.
        return is_color(candidate)
    if family == "number":
        return isinstance(candidate, (int, float)) and not isinstance(candidate, bool)
    if family == "text":
        return isinstance(candidate, str)
    return True


__all__ = ["ParamListener", "ParamSnapshot", "ParamStore", "ParamValue"]
