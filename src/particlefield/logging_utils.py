"""ログ設定"""

import logging
import logging.handlers
import os
from typing import Optional

from particlefield import config


def setup_logging(
    level: str = config.LOG_LEVEL,
    log_file: Optional[str] = config.LOG_FILE,
    log_format: str = config.LOG_FORMAT,
) -> None:
    """
    ルートロガーを設定

    コンソールに出力し、log_file が指定されていればローテーションファイルにも出力する。
    既存のハンドラはクリアする（重複出力防止）。
    """
    logger = logging.getLogger()
    logger.setLevel(level.upper())

    if logger.hasHandlers():
        logger.handlers.clear()

    formatter = logging.Formatter(log_format)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            log_file, maxBytes=1024 * 1024, backupCount=3
        )
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)
