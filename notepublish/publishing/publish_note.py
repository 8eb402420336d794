#!/usr/bin/env python3
"""
公開状態シナリオ再生スクリプト

このスクリプトはシナリオファイルに記述された公開リクエストと
外部同期サービスからの確認通知を PublishController に順番に流し、
各ノートの最終的な公開状態を表示します。

使用例:
    # シナリオを再生
    python -m notepublish.publishing.publish_note replay data/scenarios/publish.json

    # 詳細ログ付きで再生
    python -m notepublish.publishing.publish_note replay publish --verbose

    # 結果をJSONで出力
    python -m notepublish.publishing.publish_note replay publish --json

    # シナリオの構造のみ検証
    python -m notepublish.publishing.publish_note state publish
"""

import argparse
import json
import sys
from typing import Any, Dict, List, Optional

from dotenv import load_dotenv

from config import get_publish_state_display_name, get_scenario_file_path
from notepublish.errors import PublishSyncError, ScenarioError
from notepublish.storage.note_store import Note, NoteStore
from notepublish.sync.publish_controller import PublishController
from notepublish.utils.data_loader import load_data_file, load_scenario, validate_scenario


def build_store(notes: List[Dict[str, Any]]) -> NoteStore:
    """
    シナリオのノート定義からノートストアを作成

    Args:
        notes: シナリオの 'notes' 配列

    Returns:
        ノートストア
    """
    store = NoteStore()
    for entry in notes:
        store.insert_note(
            entry["id"],
            published=entry.get("published", False),
            publish_url=entry.get("publish_url", ""),
            content=entry.get("content", ""),
        )
    return store


def replay_scenario(scenario: Dict[str, Any], verbose: bool = False) -> Dict[str, Any]:
    """
    シナリオのイベントを順番に再生

    確認タイムアウトは無効にして再生します。

    Args:
        scenario: load_scenario() の戻り値
        verbose: PublishController の詳細ログを表示

    Returns:
        再生結果の辞書:
        {
            "steps": [{"index": int, "type": str, "id": str, "applied": bool}, ...],
            "completions": [{"id": str, "published": bool, "publish_url": str}, ...],
            "notes": [{"id": str, "published": bool, "publish_url": str, "publish_state": str}, ...],
            "stats": {...}
        }
    """
    store = build_store(scenario["notes"])
    controller = PublishController(confirmation_timeout=None, verbose=verbose)

    steps = []
    completions = []

    def on_complete(note: Note):
        completions.append({
            "id": note.identifier,
            "published": note.published,
            "publish_url": note.publish_url,
        })

    try:
        for index, event in enumerate(scenario["events"]):
            if event["type"] == "request":
                note = store.require(event["id"])
                applied = controller.request_publish_state_change(note, event["published"], on_complete)
            else:
                applied = controller.on_external_update(event["id"], event["published"], event.get("url", ""))

            steps.append({
                "index": index,
                "type": event["type"],
                "id": event["id"],
                "applied": applied,
            })

        notes = []
        for note in store:
            entry = note.to_dict()
            entry["publish_state"] = controller.publish_state(note).value
            notes.append(entry)

        stats = controller.get_stats()
    finally:
        controller.shutdown()

    return {
        "steps": steps,
        "completions": completions,
        "notes": notes,
        "stats": stats,
    }


def print_replay_result(result: Dict[str, Any]):
    """再生結果をコンソールに表示"""
    print("=== イベント ===\n")
    for step in result["steps"]:
        mark = "✓" if step["applied"] else "-"
        label = "リクエスト" if step["type"] == "request" else "確認通知"
        print(f"  {mark} [{step['index']}] {label}: {step['id']}")

    print("\n=== 完了コールバック ===\n")
    if not result["completions"]:
        print("  （なし）")
    for completion in result["completions"]:
        url = completion["publish_url"] or "（なし）"
        print(f"  ✓ {completion['id']}: published={completion['published']} URL: {url}")

    print("\n=== ノートの公開状態 ===\n")
    for note in result["notes"]:
        display_name = get_publish_state_display_name(note["publish_state"])
        print(f"  {note['id']}: {display_name} ({note['publish_state']})")
        if note["publish_url"]:
            print(f"    URL: {note['publish_url']}")

    stats = result["stats"]
    print("\n=== 統計 ===\n")
    print(f"  リクエスト: {stats['requests']} 件（スキップ: {stats['skipped']} 件、置き換え: {stats['superseded']} 件）")
    print(f"  確認済み: {stats['confirmed']} 件（無視: {stats['ignored']} 件）")
    print(f"  保留中: {stats['pending']} 件")


def check_scenario(file_path) -> bool:
    """
    シナリオの構造を検証して結果を表示

    Returns:
        問題がなければ True
    """
    data = load_data_file(file_path)
    issues = validate_scenario(data)

    if issues:
        print(f"✗ シナリオの構造が不正です: {file_path}")
        for issue in issues:
            print(f"  - {issue}")
        return False

    print(f"✓ シナリオの構造は正常です: {file_path}")
    print(f"  ノート: {len(data.get('notes', []))} 件")
    print(f"  イベント: {len(data.get('events', []))} 件")
    return True


def main(argv: Optional[List[str]] = None) -> int:
    """
    メイン関数 - コマンドライン引数を解析してシナリオを再生
    """
    load_dotenv()

    parser = argparse.ArgumentParser(
        description='ノート公開状態の同期 - シナリオ再生スクリプト'
    )

    subparsers = parser.add_subparsers(dest='command', help='実行するコマンド')

    # replayコマンド
    replay_parser = subparsers.add_parser(
        'replay',
        help='シナリオのリクエストと確認通知を再生'
    )
    replay_parser.add_argument(
        'scenario',
        help='シナリオファイルのパス、または data/scenarios 内のシナリオ名'
    )
    replay_parser.add_argument(
        '--verbose',
        action='store_true',
        help='詳細情報を表示'
    )
    replay_parser.add_argument(
        '--json',
        action='store_true',
        help='結果をJSONで出力'
    )

    # stateコマンド
    state_parser = subparsers.add_parser(
        'state',
        help='シナリオの構造を検証'
    )
    state_parser.add_argument(
        'scenario',
        help='シナリオファイルのパス、または data/scenarios 内のシナリオ名'
    )

    args = parser.parse_args(argv)

    # コマンドが指定されていない場合はヘルプを表示
    if not args.command:
        parser.print_help()
        return 0

    file_path = get_scenario_file_path(args.scenario)

    try:
        if args.command == 'replay':
            scenario = load_scenario(file_path)
            result = replay_scenario(scenario, verbose=args.verbose and not args.json)
            if args.json:
                print(json.dumps(result, indent=2, ensure_ascii=False))
            else:
                print_replay_result(result)
            return 0

        elif args.command == 'state':
            return 0 if check_scenario(file_path) else 1

    except ScenarioError as e:
        print(f"✗ {e}", file=sys.stderr)
        for issue in e.issues:
            print(f"  - {issue}", file=sys.stderr)
        return 1

    except (OSError, ValueError, PublishSyncError) as e:
        print(f"✗ エラーが発生しました: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())
