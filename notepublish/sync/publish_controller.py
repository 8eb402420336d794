#!/usr/bin/env python3
"""
ノート公開状態の同期モジュール

このモジュールは、ノートの公開・非公開リクエストをローカルに即時反映し、
外部の同期サービスから確認通知が届いた時点で完了コールバックを呼び出します。

リスナーはノートの識別子ごとに最大1件のみ保持されます。
同じノートに対する新しいリクエストは既存のリスナーを置き換え、
確認通知を受け取ったリスナーは削除されます。
"""

import threading
from datetime import datetime, timezone
from typing import Callable, Dict, List, Optional

from config import get_confirmation_timeout
from notepublish.errors import InvalidArgumentError
from notepublish.storage.note_store import Note, PublishState

CompletionCallback = Callable[[Note], None]

# confirmation_timeout 未指定時に設定値を使うための目印
_TIMEOUT_FROM_CONFIG = object()


def default_timer_factory(seconds: float, callback: Callable[[], None]) -> threading.Timer:
    """
    確認タイムアウト用のタイマーを作成（開始はしない）

    Args:
        seconds: タイムアウトまでの秒数
        callback: タイムアウト時に呼び出す関数

    Returns:
        start() / cancel() を持つタイマー
    """
    timer = threading.Timer(seconds, callback)
    timer.daemon = True
    return timer


class PublishListener:
    """確認通知を待つ1回限りのリスナー"""

    def __init__(self, note: Note, on_complete: CompletionCallback, desired_state: bool):
        self.note = note
        self.identifier = note.identifier
        self.on_complete = on_complete
        self.desired_state = desired_state
        self.created_at = datetime.now(timezone.utc)
        self.timer = None

    def cancel_timer(self):
        if self.timer is not None:
            self.timer.cancel()

    def __repr__(self) -> str:
        return (
            f"PublishListener(identifier={self.identifier!r}, "
            f"desired_state={self.desired_state!r})"
        )


class PublishController:
    """ノートの公開状態と外部同期サービスの確認通知を仲介するクラス"""

    def __init__(
        self,
        timer_factory: Optional[Callable] = None,
        confirmation_timeout=_TIMEOUT_FROM_CONFIG,
        verbose: bool = False
    ):
        """
        初期化

        Args:
            timer_factory: (秒数, コールバック) を受け取りタイマーを返す関数（テスト用に差し替え可能）
            confirmation_timeout: 確認通知を待つ秒数。None または 0 でタイムアウトなし
                                  （未指定の場合は環境変数 PUBLISH_CONFIRMATION_TIMEOUT または既定値）
            verbose: 処理状況をコンソールに出力する
        """
        if confirmation_timeout is _TIMEOUT_FROM_CONFIG:
            confirmation_timeout = get_confirmation_timeout()

        self.timer_factory = timer_factory or default_timer_factory
        self.confirmation_timeout = confirmation_timeout or None
        self.verbose = verbose

        self._listeners: Dict[str, PublishListener] = {}
        self._lock = threading.Lock()
        self._stats = {
            "requests": 0,
            "skipped": 0,
            "confirmed": 0,
            "ignored": 0,
            "superseded": 0,
            "expired": 0,
            "cancelled": 0,
        }

    def _log(self, message: str):
        if self.verbose:
            print(message)

    @staticmethod
    def _validate_request(note: Note, on_complete: CompletionCallback):
        """
        リクエスト引数の検証

        Raises:
            InvalidArgumentError: ノートがない、識別子が空、またはコールバックが呼び出せない場合
        """
        if note is None:
            raise InvalidArgumentError("ノートが指定されていません")

        identifier = getattr(note, "identifier", None)
        if not isinstance(identifier, str) or not identifier:
            raise InvalidArgumentError("ノートの識別子が空です")

        if not callable(on_complete):
            raise InvalidArgumentError("完了コールバックが呼び出し可能ではありません")

    def request_publish_state_change(
        self,
        note: Note,
        desired_state: bool,
        on_complete: CompletionCallback
    ) -> bool:
        """
        ノートの公開状態の変更をリクエスト

        ローカルの状態を即時に変更し、外部同期サービスからの確認通知を待つリスナーを登録します。
        処理はブロックしません。

        Args:
            note: 対象のノート
            desired_state: 公開する場合は True、非公開にする場合は False
            on_complete: 確認通知を受け取った時に1回だけ呼ばれるコールバック

        Returns:
            リクエストを登録した場合は True、すでに同じ状態で何もしなかった場合は False

        Raises:
            InvalidArgumentError: 引数が不正な場合
        """
        self._validate_request(note, on_complete)
        desired_state = bool(desired_state)
        identifier = note.identifier

        if note.published == desired_state:
            with self._lock:
                self._stats["skipped"] += 1
            self._log(f"  {identifier}: すでに{'公開' if desired_state else '非公開'}です（スキップ）")
            return False

        note.published = desired_state
        note.publish_url = ""

        listener = PublishListener(note, on_complete, desired_state)
        if self.confirmation_timeout:
            listener.timer = self.timer_factory(
                self.confirmation_timeout,
                lambda: self.expire(identifier, listener)
            )

        with self._lock:
            previous = self._listeners.get(identifier)
            self._listeners[identifier] = listener
            self._stats["requests"] += 1
            if previous is not None:
                self._stats["superseded"] += 1

        if previous is not None:
            previous.cancel_timer()
            self._log(f"⚠️  {identifier}: 保留中のリクエストを置き換えました")

        if listener.timer is not None:
            listener.timer.start()

        self._log(f"✓ {identifier}: {'公開' if desired_state else '非公開'}をリクエストしました")
        return True

    def on_external_update(self, identifier: str, published: bool, url: Optional[str]) -> bool:
        """
        外部同期サービスからの更新通知を処理

        Args:
            identifier: 更新されたノートの識別子
            published: 確定した公開フラグ
            url: 確定した公開URL（非公開の場合は空文字）

        Returns:
            保留中のリスナーを完了させた場合は True、対象のリスナーがなかった場合は False
        """
        with self._lock:
            listener = self._listeners.pop(identifier, None)
            if listener is None:
                self._stats["ignored"] += 1
            else:
                self._stats["confirmed"] += 1

        if listener is None:
            self._log(f"  {identifier}: 保留中のリクエストがありません（無視）")
            return False

        listener.cancel_timer()

        published = bool(published)
        note = listener.note
        note.published = published
        note.publish_url = url or ""

        if published != listener.desired_state:
            self._log(
                f"⚠️  {identifier}: リクエストと異なる状態が確定しました"
                f"（リクエスト: {listener.desired_state}, 確定: {published}）"
            )
        self._log(f"✓ {identifier}: {'公開' if published else '非公開'}が確定しました")

        listener.on_complete(note)
        return True

    def expire(self, identifier: str, listener: PublishListener) -> bool:
        """
        確認タイムアウトしたリスナーを削除（コールバックは呼ばない）

        置き換え済みの古いリスナーのタイマーでは、新しいリスナーを削除しません。

        Args:
            identifier: ノートの識別子
            listener: タイマーを開始したリスナー

        Returns:
            リスナーを削除した場合は True
        """
        with self._lock:
            if self._listeners.get(identifier) is not listener:
                return False
            del self._listeners[identifier]
            self._stats["expired"] += 1

        self._log(f"⚠️  {identifier}: 確認通知がタイムアウトしました（{self.confirmation_timeout}秒）")
        return True

    def cancel(self, identifier: str) -> bool:
        """
        保留中のリクエストを破棄（コールバックは呼ばない）

        Returns:
            リスナーを削除した場合は True
        """
        with self._lock:
            listener = self._listeners.pop(identifier, None)
            if listener is not None:
                self._stats["cancelled"] += 1

        if listener is None:
            return False

        listener.cancel_timer()
        self._log(f"  {identifier}: 保留中のリクエストを破棄しました")
        return True

    def has_pending(self, identifier: str) -> bool:
        with self._lock:
            return identifier in self._listeners

    def pending_identifiers(self) -> List[str]:
        with self._lock:
            return list(self._listeners.keys())

    def publish_state(self, note: Note) -> PublishState:
        """
        保留中のリクエストを考慮したノートの公開状態を取得

        Args:
            note: 対象のノート

        Returns:
            publishing / unpublishing（確認待ち）または published / unpublished
        """
        with self._lock:
            listener = self._listeners.get(note.identifier)

        if listener is not None:
            return PublishState.PUBLISHING if listener.desired_state else PublishState.UNPUBLISHING
        return PublishState.PUBLISHED if note.published else PublishState.UNPUBLISHED

    def shutdown(self):
        """すべてのタイマーを停止し、保留中のリスナーを破棄"""
        with self._lock:
            listeners = list(self._listeners.values())
            self._listeners.clear()

        for listener in listeners:
            listener.cancel_timer()

        if listeners:
            self._log(f"  保留中のリクエスト {len(listeners)} 件を破棄しました")

    def get_stats(self) -> Dict:
        """
        処理統計を取得

        Returns:
            統計情報の辞書（oldest_pending_seconds は保留中のリクエストがない場合 None）
        """
        with self._lock:
            stats = dict(self._stats)
            stats["pending"] = len(self._listeners)
            created = [listener.created_at for listener in self._listeners.values()]

        now = datetime.now(timezone.utc)
        stats["oldest_pending_seconds"] = (now - min(created)).total_seconds() if created else None
        return stats
