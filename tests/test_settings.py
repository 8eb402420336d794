from pathlib import Path

import pytest

from config import (
    PUBLISH_CONFIRMATION_TIMEOUT,
    SCENARIO_DIR,
    get_confirmation_timeout,
    get_publish_state_display_name,
    get_scenario_file_path,
)


def test_confirmation_timeout_default(monkeypatch):
    monkeypatch.delenv("PUBLISH_CONFIRMATION_TIMEOUT", raising=False)

    assert get_confirmation_timeout() == PUBLISH_CONFIRMATION_TIMEOUT


@pytest.mark.parametrize(
    "raw, expected",
    [("10", 10.0), ("0.5", 0.5), ("0", None), ("off", None), ("None", None), ("  ", PUBLISH_CONFIRMATION_TIMEOUT)],
)
def test_confirmation_timeout_env_override(monkeypatch, raw, expected):
    monkeypatch.setenv("PUBLISH_CONFIRMATION_TIMEOUT", raw)

    assert get_confirmation_timeout() == expected


@pytest.mark.parametrize("raw", ["abc", "-1"])
def test_confirmation_timeout_invalid(monkeypatch, raw):
    monkeypatch.setenv("PUBLISH_CONFIRMATION_TIMEOUT", raw)

    with pytest.raises(ValueError):
        get_confirmation_timeout()


def test_publish_state_display_name():
    assert get_publish_state_display_name("published") == "公開中"
    with pytest.raises(ValueError):
        get_publish_state_display_name("archived")


def test_scenario_file_path(tmp_path):
    existing = tmp_path / "custom"
    existing.write_text("{}", encoding="utf-8")

    assert get_scenario_file_path("publish") == SCENARIO_DIR / "publish.json"
    assert get_scenario_file_path("other.json") == Path("other.json")
    assert get_scenario_file_path(str(existing)) == existing
