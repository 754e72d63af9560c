"""
Shared application state for the MASLD-Viz Gradio viewer.

Per-browser data (the active source and its cache) lives in a
:class:`~masldviz.core.session.DashboardSession` held in a ``gr.State``.
This module only keeps the launch-time settings every new session is
created from.
"""
from typing import Any, Dict, Optional

from ..core.session import DashboardSession
from ..core.settings import ViewerSettings

# Launch-time configuration, set by launch_app()
app_state: Dict[str, Any] = {
    "settings": None,
}


def get_settings() -> ViewerSettings:
    if app_state["settings"] is None:
        app_state["settings"] = ViewerSettings.from_env()
    return app_state["settings"]


def set_settings(settings: Optional[ViewerSettings]) -> None:
    app_state["settings"] = settings


def create_session() -> DashboardSession:
    """Build a fresh session from the current launch settings."""
    return DashboardSession(get_settings())
