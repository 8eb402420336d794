#!/usr/bin/env python3
"""
Sync package

ノートの公開状態と外部同期サービスの確認通知を仲介するモジュールをまとめたパッケージです。

Modules:
    - publish_controller: 公開状態の同期（PublishController）
"""

from notepublish.sync.publish_controller import (
    PublishController,
    PublishListener,
    default_timer_factory,
)

__all__ = ["PublishController", "PublishListener", "default_timer_factory"]
