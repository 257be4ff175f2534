"""Public spatialui API contracts."""

from spatialui.api.events import (
    PointerIgnored,
    SceneRebuilt,
    SessionEvent,
    SessionEventBus,
    Subscription,
    create_event_bus,
)
from spatialui.api.platform import create_style_applier
from spatialui.api.scene import SceneBuilderPort, create_scene_builder
from spatialui.api.state import ParamStorePort, create_param_store

__all__ = [
    "ParamStorePort",
    "PointerIgnored",
    "SceneBuilderPort",
    "SceneRebuilt",
    "SessionEvent",
    "SessionEventBus",
    "Subscription",
    "create_event_bus",
    "create_param_store",
    "create_scene_builder",
    "create_style_applier",
]
