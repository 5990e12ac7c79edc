"""Server settings for the DEV URN API.

Settings come from an optional JSON file, then environment variables
(``DEVURN_*``, loaded from ``.env`` by :mod:`devurn.api.main`), then CLI flags.
The identifier engine in :mod:`devurn.core` reads none of this; the only
setting that reaches it is the detection tie-break policy, passed explicitly.
"""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any, Mapping

from ..core.detector import DetectionPolicy

logger = logging.getLogger(__name__)

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
_DEFAULT_DETECTION = DetectionPolicy()


@dataclass
class DetectionSettings:
    bare_eui64_subtype: str = _DEFAULT_DETECTION.bare_eui64_subtype
    two_segment_subtype: str = _DEFAULT_DETECTION.two_segment_subtype

    def sanitized(self) -> "DetectionSettings":
        bare = str(self.bare_eui64_subtype).strip().lower()
        two = str(self.two_segment_subtype).strip().lower()
        if bare not in ("mac", "ow"):
            logger.warning(
                "Ignoring bare_eui64_subtype=%r; using %s",
                bare,
                _DEFAULT_DETECTION.bare_eui64_subtype,
            )
            bare = _DEFAULT_DETECTION.bare_eui64_subtype
        if two not in ("org", "os"):
            logger.warning(
                "Ignoring two_segment_subtype=%r; using %s",
                two,
                _DEFAULT_DETECTION.two_segment_subtype,
            )
            two = _DEFAULT_DETECTION.two_segment_subtype
        return DetectionSettings(bare_eui64_subtype=bare, two_segment_subtype=two)

    def to_policy(self) -> DetectionPolicy:
        clean = self.sanitized()
        return DetectionPolicy(
            bare_eui64_subtype=clean.bare_eui64_subtype,
            two_segment_subtype=clean.two_segment_subtype,
        )


@dataclass
class ServerSettings:
    host: str = "0.0.0.0"
    port: int = 8000
    log_level: str = "INFO"
    detection: DetectionSettings = field(default_factory=DetectionSettings)

    def to_dict(self) -> dict[str, object]:
        return asdict(self)

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "ServerSettings":
        if not isinstance(payload, Mapping):
            return cls()
        defaults = cls()
        detection_payload = payload.get("detection")
        detection = DetectionSettings()
        if isinstance(detection_payload, Mapping):
            detection = DetectionSettings(
                bare_eui64_subtype=str(
                    detection_payload.get("bare_eui64_subtype", detection.bare_eui64_subtype)
                ),
                two_segment_subtype=str(
                    detection_payload.get("two_segment_subtype", detection.two_segment_subtype)
                ),
            )
        host = payload.get("host", defaults.host)
        return cls(
            host=host if isinstance(host, str) and host.strip() else defaults.host,
            port=_sanitize_port(payload.get("port"), default=defaults.port),
            log_level=_sanitize_log_level(payload.get("log_level"), default=defaults.log_level),
            detection=detection,
        ).sanitized()

    def sanitized(self) -> "ServerSettings":
        return ServerSettings(
            host=self.host.strip() or "0.0.0.0",
            port=_sanitize_port(self.port, default=8000),
            log_level=_sanitize_log_level(self.log_level, default="INFO"),
            detection=self.detection.sanitized(),
        )


def _sanitize_port(value: object, default: int) -> int:
    if value is None:
        return default
    try:
        port = int(value)
    except (TypeError, ValueError):
        return default
    if not 0 < port < 65536:
        return default
    return port


def _sanitize_log_level(value: object, default: str) -> str:
    if not isinstance(value, str):
        return default
    level = value.strip().upper()
    return level if level in _LOG_LEVELS else default


def load_server_settings(path: Path | None) -> ServerSettings:
    if path is None or not path.exists():
        return ServerSettings()
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        logger.warning("Failed to read server settings %s: %s; using defaults", path, exc)
        return ServerSettings()
    return ServerSettings.from_dict(data)


def save_server_settings(path: Path, settings: ServerSettings) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    serialized = settings.sanitized().to_dict()
    path.write_text(json.dumps(serialized, indent=2, sort_keys=True), encoding="utf-8")


def apply_env_overrides(
    settings: ServerSettings, environ: Mapping[str, str]
) -> ServerSettings:
    detection = DetectionSettings(
        bare_eui64_subtype=environ.get(
            "DEVURN_BARE_EUI64_SUBTYPE", settings.detection.bare_eui64_subtype
        ),
        two_segment_subtype=environ.get(
            "DEVURN_TWO_SEGMENT_SUBTYPE", settings.detection.two_segment_subtype
        ),
    )
    return ServerSettings(
        host=environ.get("DEVURN_HOST", settings.host),
        port=_sanitize_port(environ.get("DEVURN_PORT"), default=settings.port),
        log_level=environ.get("DEVURN_LOG_LEVEL", settings.log_level),
        detection=detection,
    ).sanitized()


__all__ = [
    "DetectionSettings",
    "ServerSettings",
    "apply_env_overrides",
    "load_server_settings",
    "save_server_settings",
]
