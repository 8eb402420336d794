#!/usr/bin/env python3
"""
データローダー

JSONデータファイルとシナリオファイルの読み込み機能を提供します。
"""

import json
from pathlib import Path
from typing import Any, Dict, List

from config import REQUIRED_SCENARIO_FIELDS, SCENARIO_EVENT_TYPES
from notepublish.errors import ScenarioError


def load_data_file(file_path: Path) -> Dict[str, Any]:
    """
    JSONデータファイルを読み込む

    Args:
        file_path: 読み込むJSONファイルのパス

    Returns:
        読み込んだJSONデータ（辞書形式）

    Raises:
        FileNotFoundError: ファイルが存在しない場合
        UnicodeDecodeError: UTF-8として読み込めない場合
        json.JSONDecodeError: JSON形式が不正な場合
    """
    if not file_path.exists():
        raise FileNotFoundError(f"データファイルが見つかりません: {file_path}")

    with open(file_path, 'r', encoding='utf-8') as f:
        return json.load(f)


def validate_scenario(data: Any) -> List[str]:
    """
    シナリオデータの構造を検証

    Args:
        data: 読み込んだシナリオデータ

    Returns:
        問題点のリスト（問題がなければ空）
    """
    if not isinstance(data, dict):
        return ["シナリオはオブジェクトである必要があります"]

    issues = []
    notes = data.get("notes", [])
    events = data.get("events", [])

    if not isinstance(notes, list):
        issues.append("'notes' は配列である必要があります")
        notes = []
    if not isinstance(events, list):
        issues.append("'events' は配列である必要があります")
        events = []

    note_ids = set()
    for index, note in enumerate(notes):
        if not isinstance(note, dict):
            issues.append(f"notes[{index}]: オブジェクトである必要があります")
            continue
        for field in REQUIRED_SCENARIO_FIELDS["note"]:
            if field not in note:
                issues.append(f"notes[{index}]: 必須フィールド '{field}' が存在しません")
        note_id = note.get("id")
        if "id" in note and (not isinstance(note_id, str) or not note_id):
            issues.append(f"notes[{index}]: 'id' は空でない文字列である必要があります")
        elif note_id in note_ids:
            issues.append(f"notes[{index}]: 'id' が重複しています: {note_id}")
        elif note_id is not None:
            note_ids.add(note_id)
        if "published" in note and not isinstance(note["published"], bool):
            issues.append(f"notes[{index}]: 'published' は真偽値である必要があります")
        for field in ("publish_url", "content"):
            if field in note and not isinstance(note[field], str):
                issues.append(f"notes[{index}]: '{field}' は文字列である必要があります")

    for index, event in enumerate(events):
        if not isinstance(event, dict):
            issues.append(f"events[{index}]: オブジェクトである必要があります")
            continue
        event_type = event.get("type")
        if event_type not in SCENARIO_EVENT_TYPES:
            issues.append(f"events[{index}]: 不明なイベント種別です: {event_type}")
            continue
        for field in REQUIRED_SCENARIO_FIELDS[event_type]:
            if field not in event:
                issues.append(f"events[{index}]: 必須フィールド '{field}' が存在しません")
        if "published" in event and not isinstance(event["published"], bool):
            issues.append(f"events[{index}]: 'published' は真偽値である必要があります")
        if "url" in event and not isinstance(event["url"], str):
            issues.append(f"events[{index}]: 'url' は文字列である必要があります")

        event_id = event.get("id")
        if "id" in event and (not isinstance(event_id, str) or not event_id):
            issues.append(f"events[{index}]: 'id' は空でない文字列である必要があります")
        # 更新通知は未知の識別子でもよいが、リクエストは既存のノートが対象
        elif event_type == "request" and event_id is not None and event_id not in note_ids:
            issues.append(f"events[{index}]: ノートが見つかりません: {event_id}")

    return issues


def load_scenario(file_path: Path) -> Dict[str, Any]:
    """
    シナリオファイルを読み込んで検証する

    Args:
        file_path: シナリオファイルのパス

    Returns:
        {"notes": [...], "events": [...]}

    Raises:
        FileNotFoundError: ファイルが存在しない場合
        json.JSONDecodeError: JSON形式が不正な場合
        ScenarioError: シナリオの構造が不正な場合
    """
    data = load_data_file(file_path)
    issues = validate_scenario(data)
    if issues:
        raise ScenarioError(f"シナリオの構造が不正です: {file_path}", issues=issues)

    return {
        "notes": data.get("notes", []),
        "events": data.get("events", []),
    }
