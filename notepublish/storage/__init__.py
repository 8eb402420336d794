#!/usr/bin/env python3
"""
Storage package

ノートのレコードとインメモリのノートストアをまとめたパッケージです。

Modules:
    - note_store: Note / PublishState / NoteStore
"""

from notepublish.storage.note_store import Note, NoteStore, PublishState

__all__ = ["Note", "NoteStore", "PublishState"]
