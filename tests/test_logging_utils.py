"""ログ設定・デモ起動補助のテスト"""

import logging
import logging.handlers

import pytest

from particlefield import config
from particlefield.logging_utils import setup_logging
from particlefield.main import _select_preset


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    for handler in root.handlers:
        if type(handler) in (logging.StreamHandler, logging.handlers.RotatingFileHandler):
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


def test_console_only(restore_root_logger):
    setup_logging("debug", log_file=None)
    root = restore_root_logger
    assert root.level == logging.DEBUG
    assert len(root.handlers) == 1
    assert isinstance(root.handlers[0], logging.StreamHandler)


def test_file_handler_creates_directory(restore_root_logger, tmp_path):
    """ログファイル指定でディレクトリを作成し、ローテーションハンドラを追加"""
    log_file = tmp_path / "logs" / "field.log"
    setup_logging("INFO", log_file=str(log_file))
    root = restore_root_logger
    assert log_file.parent.is_dir()
    assert any(isinstance(h, logging.handlers.RotatingFileHandler) for h in root.handlers)


def test_repeated_setup_does_not_duplicate(restore_root_logger):
    setup_logging("INFO")
    setup_logging("INFO")
    assert len(restore_root_logger.handlers) == 1


def test_select_preset_from_env(monkeypatch):
    monkeypatch.setenv("PARTICLEFIELD_PRESET", "dense")
    assert _select_preset() == config.FIELD_PRESETS["dense"]


def test_select_unknown_preset_falls_back(monkeypatch):
    monkeypatch.setenv("PARTICLEFIELD_PRESET", "nope")
    assert _select_preset() == config.FIELD_PRESETS["default"]
