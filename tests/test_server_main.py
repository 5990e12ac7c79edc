from __future__ import annotations

import json
import logging
from unittest.mock import patch

from devurn.api.main import main
from devurn.api.settings import ServerSettings


def test_logging_is_configured_before_settings_load(tmp_path) -> None:
    calls: list[str] = []

    def fake_basic_config(**kwargs) -> None:
        calls.append("logging")

    def fake_load(path) -> ServerSettings:
        calls.append("settings")
        return ServerSettings()

    root = logging.getLogger()
    original_level = root.level
    try:
        with patch.object(root, "handlers", []), patch(
            "devurn.api.main.logging.basicConfig", side_effect=fake_basic_config
        ), patch("devurn.api.main.load_server_settings", side_effect=fake_load), patch(
            "devurn.api.main.load_dotenv"
        ), patch("devurn.api.main.uvicorn.run") as run:
            main(["--config", str(tmp_path / "absent.json")])
    finally:
        root.setLevel(original_level)

    assert calls == ["logging", "settings"]
    run.assert_called_once()


def test_cli_flags_override_config_file(tmp_path, monkeypatch) -> None:
    for name in ("DEVURN_HOST", "DEVURN_PORT", "DEVURN_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    config = tmp_path / "devurn.json"
    config.write_text(json.dumps({"host": "10.0.0.1", "port": 9000}), encoding="utf-8")

    root = logging.getLogger()
    original_level = root.level
    try:
        with patch("devurn.api.main.load_dotenv"), patch(
            "devurn.api.main.logging.basicConfig"
        ), patch("devurn.api.main.uvicorn.run") as run:
            main(["--config", str(config), "--port", "9100"])
    finally:
        root.setLevel(original_level)

    _, kwargs = run.call_args
    assert kwargs["host"] == "10.0.0.1"
    assert kwargs["port"] == 9100
