from __future__ import annotations

import logging
import os
from typing import Optional, Union

LOG_LEVEL_ENV = "STRING_QUEUE_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def resolve_log_level(level: Optional[Union[int, str]] = None) -> int:
    """
    引数 > 環境変数 > WARNING の順でログレベルを決める
    """
    if level is None:
        level = os.environ.get(LOG_LEVEL_ENV) or DEFAULT_LOG_LEVEL
    if isinstance(level, int):
        return level

    resolved = logging.getLevelName(level.strip().upper())
    if not isinstance(resolved, int):
        raise ValueError(f"unknown log level: {level!r}")
    return resolved


def configure_logging(level: Optional[Union[int, str]] = None) -> int:
    """
    ドライバやデバッグ用。ライブラリ側は import 時にハンドラを設定しない
    """
    resolved = resolve_log_level(level)
    logging.basicConfig(level=resolved, format=DEFAULT_LOG_FORMAT)
    logging.getLogger("string_queue").setLevel(resolved)
    return resolved
