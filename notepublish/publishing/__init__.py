#!/usr/bin/env python3
"""
Publishing package

公開リクエストと確認通知のシナリオを再生するスクリプトをまとめたパッケージです。

Modules:
    - publish_note: シナリオ再生のメインスクリプト
"""

__all__ = []
