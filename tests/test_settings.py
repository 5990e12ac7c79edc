from __future__ import annotations

import json

from devurn.api.settings import (
    DetectionSettings,
    ServerSettings,
    apply_env_overrides,
    load_server_settings,
    save_server_settings,
)


def test_missing_file_uses_defaults(tmp_path) -> None:
    settings = load_server_settings(tmp_path / "absent.json")
    assert settings == ServerSettings()
    assert settings.detection.to_policy().bare_eui64_subtype == "mac"


def test_corrupt_file_uses_defaults(tmp_path) -> None:
    path = tmp_path / "devurn.json"
    path.write_text("{not json", encoding="utf-8")
    assert load_server_settings(path) == ServerSettings()


def test_round_trip_through_file(tmp_path) -> None:
    path = tmp_path / "config" / "devurn.json"
    original = ServerSettings(
        host="127.0.0.1",
        port=9001,
        log_level="debug",
        detection=DetectionSettings(bare_eui64_subtype="ow", two_segment_subtype="os"),
    )
    save_server_settings(path, original)

    stored = json.loads(path.read_text(encoding="utf-8"))
    assert stored["log_level"] == "DEBUG"

    loaded = load_server_settings(path)
    assert loaded.host == "127.0.0.1"
    assert loaded.port == 9001
    assert loaded.detection.to_policy().two_segment_subtype == "os"


def test_invalid_values_fall_back(tmp_path) -> None:
    path = tmp_path / "devurn.json"
    path.write_text(
        json.dumps(
            {
                "port": "not-a-port",
                "log_level": "LOUD",
                "detection": {"bare_eui64_subtype": "org", "two_segment_subtype": "OS"},
            }
        ),
        encoding="utf-8",
    )
    settings = load_server_settings(path)
    assert settings.port == 8000
    assert settings.log_level == "INFO"
    assert settings.detection.bare_eui64_subtype == "mac"
    assert settings.detection.two_segment_subtype == "os"


def test_env_overrides() -> None:
    settings = apply_env_overrides(
        ServerSettings(),
        {
            "DEVURN_HOST": "localhost",
            "DEVURN_PORT": "8123",
            "DEVURN_LOG_LEVEL": "warning",
            "DEVURN_BARE_EUI64_SUBTYPE": "ow",
        },
    )
    assert settings.host == "localhost"
    assert settings.port == 8123
    assert settings.log_level == "WARNING"
    assert settings.detection.bare_eui64_subtype == "ow"
    assert settings.detection.two_segment_subtype == "org"
