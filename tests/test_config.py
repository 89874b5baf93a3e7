"""Unit tests for configuration and flag parsing."""

import pytest
from pydantic import ValidationError

from image_resizer.cli import main, parse_flags
from image_resizer.common.config import ResizerConfig, parse_size
from image_resizer.common.schemas import Size


# ============================================================================
# SIZE PARSING
# ============================================================================


def test_parse_size():
    assert parse_size("1000x800") == Size(1000, 800)


def test_parse_size_is_unanchored():
    assert parse_size("max=640x480px") == Size(640, 480)


@pytest.mark.parametrize("value", ["", "1000", "x100", "100x", "axb"])
def test_parse_size_rejects_malformed(value: str):
    with pytest.raises(ValueError, match="expected size in the format WxH"):
        _ = parse_size(value)


# ============================================================================
# CONFIG VALIDATION
# ============================================================================


def test_config_defaults():
    config = ResizerConfig(base_url="http://origin/")

    assert config.listen == "0.0.0.0:8080"
    assert config.max_size == Size(1000, 1000)
    assert config.fetch_timeout == 30.0
    assert config.log_level == "INFO"
    assert config.host == "0.0.0.0"
    assert config.port == 8080


def test_config_requires_base_url():
    with pytest.raises(ValidationError, match="a base URL must be provided"):
        _ = ResizerConfig(base_url="")


def test_config_requires_listen():
    with pytest.raises(ValidationError, match="a listen address is required"):
        _ = ResizerConfig(base_url="http://origin/", listen="")


def test_config_rejects_listen_without_port():
    with pytest.raises(ValidationError, match="host:port"):
        _ = ResizerConfig(base_url="http://origin/", listen="localhost")


def test_config_listen_without_host():
    config = ResizerConfig(base_url="http://origin/", listen=":9000")

    assert config.host == "0.0.0.0"
    assert config.port == 9000


def test_config_parses_max_size_string():
    config = ResizerConfig(base_url="http://origin/", max_size="640x480")

    assert config.max_size == Size(640, 480)
    assert config.max_size.width == 640


def test_config_rejects_bad_max_size():
    with pytest.raises(ValidationError, match="expected size in the format WxH"):
        _ = ResizerConfig(base_url="http://origin/", max_size="big")


@pytest.mark.parametrize("timeout", [0, -1.0])
def test_config_non_positive_timeout_disables_deadline(timeout: float):
    assert ResizerConfig(base_url="http://origin/", fetch_timeout=timeout).fetch_timeout is None


def test_config_log_level_is_normalized():
    assert ResizerConfig(base_url="http://origin/", log_level="debug").log_level == "DEBUG"


# ============================================================================
# FLAGS
# ============================================================================


def test_parse_flags():
    config = parse_flags(
        [
            "--base-url",
            "https://assets.example.com/",
            "--listen",
            "127.0.0.1:9090",
            "--max-size",
            "2000x1500",
            "--fetch-timeout",
            "5",
        ]
    )

    assert config.base_url == "https://assets.example.com/"
    assert config.host == "127.0.0.1"
    assert config.port == 9090
    assert config.max_size == Size(2000, 1500)
    assert config.fetch_timeout == 5.0


def test_parse_flags_log_level_from_env(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("LOG_LEVEL", "warning")

    assert parse_flags(["--base-url", "http://origin/"]).log_level == "WARNING"


def test_main_exits_without_base_url():
    with pytest.raises(SystemExit) as exc_info:
        main([])

    assert exc_info.value.code == 1


def test_main_runs_server(monkeypatch: pytest.MonkeyPatch):
    calls: list[dict[str, object]] = []

    def _fake_run(app: object, **kwargs: object) -> None:
        calls.append({"app": app, **kwargs})

    monkeypatch.setattr("image_resizer.cli.uvicorn.run", _fake_run)
    levels: list[str] = []
    monkeypatch.setattr("image_resizer.cli.setup_logging", levels.append)

    main(["--base-url", "http://origin/", "--listen", "127.0.0.1:9090", "--log-level", "warning"])

    assert len(calls) == 1
    assert calls[0]["host"] == "127.0.0.1"
    assert calls[0]["port"] == 9090
    assert calls[0]["log_level"] == "warning"
    assert levels == ["WARNING"]
