"""Parameter state and control-panel bindings."""

from spatialui.state.controls import (
    DEFAULT_CONTROLS,
    ControlDescriptor,
    apply_control_edit,
    color_keys,
    panel_items,
)
from spatialui.state.param_store import ParamSnapshot, ParamStore

__all__ = [
    "DEFAULT_CONTROLS",
    "ControlDescriptor",
    "ParamSnapshot",
    "ParamStore",
    "apply_control_edit",
    "color_keys",
    "panel_items",
]
