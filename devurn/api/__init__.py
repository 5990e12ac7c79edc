from __future__ import annotations

from .server import create_app
from .settings import DetectionSettings, ServerSettings, load_server_settings

__all__ = [
    "DetectionSettings",
    "ServerSettings",
    "create_app",
    "load_server_settings",
]
