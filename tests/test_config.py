from __future__ import annotations

import logging

import pytest
from pydantic import ValidationError

from localekit.core.config import Settings
from localekit.core.logging_config import LevelColorFormatter, setup_logging


def test_defaults(monkeypatch):
    for name in ("DEFAULT_LOCALE", "BASE_LANG", "RESOURCES_DIRNAME", "RTL_LANGS"):
        monkeypatch.delenv(f"LOCALEKIT_{name}", raising=False)
    s = Settings()
    assert s.DEFAULT_LOCALE == "en-US"
    assert s.BASE_LANG == "en"
    assert s.RESOURCES_DIRNAME == "resources"
    assert s.RTL_LANGS == ["ar", "iw"]


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("LOCALEKIT_DEFAULT_LOCALE", "fr-FR")
    monkeypatch.setenv("LOCALEKIT_RTL_LANGS", "AR, he,fa")
    s = Settings()
    assert s.DEFAULT_LOCALE == "fr-FR"
    assert s.RTL_LANGS == ["ar", "he", "fa"]


def test_base_lang_must_be_two_letters(monkeypatch):
    monkeypatch.setenv("LOCALEKIT_BASE_LANG", "eng")
    with pytest.raises(ValidationError):
        Settings()


@pytest.fixture
def restore_root_logging():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    for h in root.handlers:
        h.close()
    root.handlers[:] = handlers
    root.setLevel(level)


def test_setup_logging_with_file(tmp_path, restore_root_logging):
    log_dir = tmp_path / "logs"
    setup_logging(log_file=True, debug=True, log_dir=str(log_dir))
    root = logging.getLogger()
    assert root.level == logging.DEBUG
    assert len(root.handlers) == 2
    assert len(list(log_dir.glob("localekit_*.log"))) == 1
    assert logging.getLogger("localekit.infra").level == logging.DEBUG


def test_setup_logging_console_only(restore_root_logging):
    setup_logging(log_file=False)
    assert len(logging.getLogger().handlers) == 1
    assert logging.getLogger("localekit.infra").level == logging.WARNING


def _record(level: int) -> logging.LogRecord:
    return logging.LogRecord("localekit.test", level, __file__, 1, "hello", None, None)


def test_level_color_formatter_tints_level_name():
    fmt = LevelColorFormatter("%(levelname)s %(message)s", use_color=True)
    record = _record(logging.ERROR)
    assert fmt.format(record) == "\033[31mERROR\033[0m hello"
    assert record.levelname == "ERROR"


def test_level_color_formatter_plain_when_disabled():
    fmt = LevelColorFormatter("%(levelname)s %(message)s", use_color=False)
    assert fmt.format(_record(logging.WARNING)) == "WARNING hello"
