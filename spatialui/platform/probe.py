"""Device classification from injected environment signals."""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Literal, TypeAlias

_LOG = logging.getLogger(__name__)

_VISION_MARKER = re.compile(r"VisionOS|Apple Vision", re.IGNORECASE)
# Desktop Safari on macOS matches this too; see PlatformClassification.ambiguous.
_VISION_HEURISTIC = re.compile(r"Macintosh.*AppleWebKit.*Safari")
_MOBILE_MARKER = re.compile(r"iPhone|iPad|iPod|Android")
_IPAD_PRO_MARKER = re.compile(r"iPad Pro")

ClassificationRule: TypeAlias = Literal["vision-marker", "vision-heuristic", "mobile-marker", "default"]


class DeviceCategory(Enum):
    """Coarse device class resolved once per session."""

    VISION_PRO = "VisionPro"
    TABLET = "Tablet"
    DESKTOP = "Desktop"


@dataclass(frozen=True, slots=True)
class PlatformSignals:
    """Identifying strings exposed by the host runtime."""

    user_agent: str = ""
    platform: str = ""


@dataclass(frozen=True, slots=True)
class PlatformClassification:
    """Classification result with the rule that produced it."""

    category: DeviceCategory
    rule: ClassificationRule
    ambiguous: bool = False


def classify_detailed(
    signals: PlatformSignals | None,
    *,
    strict_vision: bool = False,
) -> PlatformClassification:
    """Classify signals, reporting which rule matched.

    The Vision heuristic (WebKit Safari on a Macintosh user agent without
    mobile markers) cannot tell Vision Pro apart from desktop Safari. Matches
    through it are marked ``ambiguous``; ``strict_vision`` disables it.
    """
    user_agent = _signal_text(signals)
    if _VISION_MARKER.search(user_agent):
        return PlatformClassification(DeviceCategory.VISION_PRO, "vision-marker")
    is_mobile = _MOBILE_MARKER.search(user_agent) is not None
    if not strict_vision and not is_mobile and _VISION_HEURISTIC.search(user_agent):
        _LOG.debug("platform_probe_heuristic_match user_agent=%s", user_agent)
        return PlatformClassification(DeviceCategory.VISION_PRO, "vision-heuristic", ambiguous=True)
    if is_mobile:
        return PlatformClassification(DeviceCategory.TABLET, "mobile-marker")
    return PlatformClassification(DeviceCategory.DESKTOP, "default")


def classify(signals: PlatformSignals | None, *, strict_vision: bool = False) -> DeviceCategory:
    """Classify signals into a device category. Never raises."""
    return classify_detailed(signals, strict_vision=strict_vision).category


def is_vision_os(signals: PlatformSignals | None) -> bool:
    return classify(signals) is DeviceCategory.VISION_PRO


def is_ipad_os(signals: PlatformSignals | None) -> bool:
    return re.search(r"iPad|iPhone|iPod", _signal_text(signals)) is not None


def optimal_framebuffer_scale(signals: PlatformSignals | None) -> float:
    """Advisory framebuffer scale for the detected hardware class."""
    if is_vision_os(signals):
        return 0.9
    if is_ipad_os(signals):
        return 0.85 if _IPAD_PRO_MARKER.search(_signal_text(signals)) else 0.75
    return 1.0


def signals_from_environ(env: Mapping[str, str]) -> PlatformSignals:
    """Build a signal bundle for headless hosts from environment variables."""
    return PlatformSignals(
        user_agent=str(env.get("SPATIALUI_USER_AGENT", "")).strip(),
        platform=str(env.get("SPATIALUI_PLATFORM", "")).strip(),
    )


def _signal_text(signals: PlatformSignals | None) -> str:
    if signals is None:
        return ""
    parts = [str(signals.user_agent or ""), str(signals.platform or "")]
    return " ".join(part for part in parts if part)


__all__ = [
    "ClassificationRule",
    "DeviceCategory",
    "PlatformClassification",
    "PlatformSignals",
    "classify",
    "classify_detailed",
    "is_ipad_os",
    "is_vision_os",
    "optimal_framebuffer_scale",
    "signals_from_environ",
]
