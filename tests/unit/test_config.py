import logging

from esh.config import Config, DEFAULT_LOG_LEVEL


def test_defaults_without_environment():
    cfg = Config.from_env({})
    assert cfg.enable_debug_logs is False
    assert cfg.log_level == DEFAULT_LOG_LEVEL
    assert cfg.effective_level == logging.WARNING


def test_debug_flag_values():
    for raw in ("1", "true", "YES", " on "):
        assert Config.from_env({"ESH_DEBUG": raw}).enable_debug_logs
    for raw in ("", "0", "false", "nope"):
        assert not Config.from_env({"ESH_DEBUG": raw}).enable_debug_logs


def test_log_level_from_environment():
    cfg = Config.from_env({"ESH_LOG_LEVEL": "info"})
    assert cfg.log_level == "INFO"
    assert cfg.effective_level == logging.INFO


def test_unknown_log_level_falls_back():
    assert Config.from_env({"ESH_LOG_LEVEL": "chatty"}).log_level == DEFAULT_LOG_LEVEL


def test_debug_logs_force_debug_level():
    cfg = Config(enable_debug_logs=True, log_level="ERROR")
    assert cfg.effective_level == logging.DEBUG
