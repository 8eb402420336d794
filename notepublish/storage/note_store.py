#!/usr/bin/env python3
"""
ノートストア

公開状態を持つノートのレコードと、外部ストレージ層の代わりとなる
インメモリのノートストアを提供します。永続化は行いません。
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterator, List, Optional

from notepublish.errors import DuplicateNoteError, InvalidArgumentError, NoteNotFoundError


class PublishState(str, Enum):
    """ノートの公開状態（保存はせず、フィールドから導出する）"""

    UNPUBLISHED = "unpublished"
    PUBLISHING = "publishing"
    PUBLISHED = "published"
    UNPUBLISHING = "unpublishing"


@dataclass
class Note:
    """外部ストレージ層が所有するノートのレコード"""

    identifier: str
    published: bool = False
    publish_url: str = ""
    content: str = ""

    @property
    def publish_state(self) -> PublishState:
        """
        フィールドのみから公開状態を導出

        保留中のリクエストを考慮した状態は PublishController.publish_state() を使用してください。
        """
        if self.published:
            return PublishState.PUBLISHED if self.publish_url else PublishState.PUBLISHING
        return PublishState.UNPUBLISHING if self.publish_url else PublishState.UNPUBLISHED

    def to_dict(self) -> Dict:
        return {
            "id": self.identifier,
            "published": self.published,
            "publish_url": self.publish_url,
            "publish_state": self.publish_state.value,
        }


class NoteStore:
    """ノートをメモリ上で管理するクラス"""

    def __init__(self, notes: Optional[List[Note]] = None):
        self._notes: Dict[str, Note] = {}
        for note in notes or []:
            self.add(note)

    def add(self, note: Note) -> Note:
        """
        既存のノートを登録

        Args:
            note: 登録するノート

        Returns:
            登録したノート

        Raises:
            InvalidArgumentError: 識別子が空の場合
            DuplicateNoteError: 同じ識別子のノートが既に存在する場合
        """
        if not isinstance(note.identifier, str) or not note.identifier:
            raise InvalidArgumentError("ノートの識別子が空です")
        if note.identifier in self._notes:
            raise DuplicateNoteError(f"ノートが既に存在します: {note.identifier}")

        self._notes[note.identifier] = note
        return note

    def insert_note(
        self,
        identifier: str,
        published: bool = False,
        publish_url: str = "",
        content: str = ""
    ) -> Note:
        """
        新しいノートを作成して登録

        Args:
            identifier: ノートの識別子
            published: 公開フラグ
            publish_url: 公開URL（非公開の場合は空文字）
            content: ノート本文

        Returns:
            作成したノート
        """
        return self.add(Note(
            identifier=identifier,
            published=published,
            publish_url=publish_url,
            content=content,
        ))

    def get(self, identifier: str) -> Optional[Note]:
        return self._notes.get(identifier)

    def require(self, identifier: str) -> Note:
        """識別子でノートを取得（存在しない場合は NoteNotFoundError）"""
        note = self._notes.get(identifier)
        if note is None:
            raise NoteNotFoundError(identifier)
        return note

    def identifiers(self) -> List[str]:
        return list(self._notes.keys())

    def __contains__(self, identifier: object) -> bool:
        return identifier in self._notes

    def __len__(self) -> int:
        return len(self._notes)

    def __iter__(self) -> Iterator[Note]:
        return iter(list(self._notes.values()))
