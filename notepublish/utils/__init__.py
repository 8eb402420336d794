#!/usr/bin/env python3
"""
Utilities package

共通ユーティリティをまとめたパッケージです。

Modules:
    - data_loader: JSONデータ・シナリオファイル読み込みユーティリティ
"""

__all__ = []
