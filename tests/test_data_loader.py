import json

import pytest

from notepublish.errors import ScenarioError
from notepublish.utils.data_loader import load_data_file, load_scenario, validate_scenario


def _write(tmp_path, data, name="scenario.json"):
    path = tmp_path / name
    path.write_text(json.dumps(data, ensure_ascii=False), encoding="utf-8")
    return path


def test_load_data_file_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_data_file(tmp_path / "missing.json")


def test_load_data_file_invalid_json(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(json.JSONDecodeError):
        load_data_file(path)


def test_load_scenario_defaults_missing_sections(tmp_path):
    path = _write(tmp_path, {})

    assert load_scenario(path) == {"notes": [], "events": []}


def test_load_scenario_valid(tmp_path):
    data = {
        "notes": [{"id": "A", "published": False}],
        "events": [
            {"type": "request", "id": "A", "published": True},
            {"type": "update", "id": "unknown", "published": True, "url": "http://x/y"},
        ],
    }

    scenario = load_scenario(_write(tmp_path, data))

    assert scenario["notes"] == data["notes"]
    assert len(scenario["events"]) == 2


def test_load_scenario_reports_issues(tmp_path):
    data = {
        "notes": [{"id": "A"}, {"id": "A"}, {"published": "yes"}],
        "events": [
            {"type": "delete", "id": "A"},
            {"type": "request", "id": "B", "published": True},
            {"type": "update", "id": "A"},
        ],
    }

    with pytest.raises(ScenarioError) as excinfo:
        load_scenario(_write(tmp_path, data))

    issues = excinfo.value.issues
    assert any("重複" in issue for issue in issues)
    assert any("notes[2]: 必須フィールド 'id'" in issue for issue in issues)
    assert any("notes[2]: 'published'" in issue for issue in issues)
    assert any("不明なイベント種別" in issue for issue in issues)
    assert any("events[1]: ノートが見つかりません: B" in issue for issue in issues)
    assert any("events[2]: 必須フィールド 'published'" in issue for issue in issues)


def test_validate_scenario_rejects_non_object():
    assert validate_scenario([]) == ["シナリオはオブジェクトである必要があります"]
    assert validate_scenario({"notes": {}, "events": "x"}) == [
        "'notes' は配列である必要があります",
        "'events' は配列である必要があります",
    ]


@pytest.mark.parametrize("event_type", ["request", "update"])
@pytest.mark.parametrize("event_id", [["A"], {"id": "A"}, 5, ""])
def test_validate_scenario_rejects_non_string_event_id(event_type, event_id):
    data = {
        "notes": [{"id": "A"}],
        "events": [{"type": event_type, "id": event_id, "published": True}],
    }

    assert validate_scenario(data) == ["events[0]: 'id' は空でない文字列である必要があります"]


def test_validate_scenario_rejects_non_string_text_fields():
    data = {
        "notes": [{"id": "A", "publish_url": 5, "content": ["memo"]}],
        "events": [{"type": "update", "id": "A", "published": True, "url": 5}],
    }

    assert validate_scenario(data) == [
        "notes[0]: 'publish_url' は文字列である必要があります",
        "notes[0]: 'content' は文字列である必要があります",
        "events[0]: 'url' は文字列である必要があります",
    ]
