#!/usr/bin/env python3
"""
エラークラス定義

公開状態同期で使用する例外をまとめたモジュールです。
"""


class PublishSyncError(Exception):
    """公開状態同期に関する基底エラークラス"""
    pass


class InvalidArgumentError(PublishSyncError, ValueError):
    """不正な引数（識別子が空のノート、呼び出し不可能なコールバックなど）"""
    pass


class NoteNotFoundError(PublishSyncError, KeyError):
    """ノートが見つからない"""

    def __init__(self, identifier: str):
        super().__init__(identifier)
        self.identifier = identifier

    def __str__(self) -> str:
        return f"ノートが見つかりません: {self.identifier}"


class DuplicateNoteError(PublishSyncError):
    """同じ識別子のノートが既に存在する"""
    pass


class ScenarioError(PublishSyncError):
    """シナリオファイルの構造エラー"""

    def __init__(self, message: str, issues=None):
        super().__init__(message)
        self.issues = list(issues or [])
