#!/usr/bin/env python3
"""
Note publish synchronizer

ノートの公開・非公開リクエストと外部同期サービスの確認通知を同期するパッケージです。

Packages:
    - storage: ノートのレコードとインメモリのノートストア
    - sync: 公開状態の同期
    - utils: シナリオファイル読み込みユーティリティ
    - publishing: シナリオ再生スクリプト
"""

from notepublish.errors import (
    DuplicateNoteError,
    InvalidArgumentError,
    NoteNotFoundError,
    PublishSyncError,
    ScenarioError,
)
from notepublish.storage.note_store import Note, NoteStore, PublishState
from notepublish.sync.publish_controller import PublishController, PublishListener

__all__ = [
    "Note",
    "NoteStore",
    "PublishState",
    "PublishController",
    "PublishListener",
    "PublishSyncError",
    "InvalidArgumentError",
    "NoteNotFoundError",
    "DuplicateNoteError",
    "ScenarioError",
]
