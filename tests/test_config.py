import logging

from pyinifile.config import DEFAULT_CONFIG, ENV_NOSECTION_COMPAT, IniConfig


def test_default_config_disables_compat_mode():
    assert DEFAULT_CONFIG.nosection_compat is False
    assert IniConfig() == DEFAULT_CONFIG


def test_from_env_reads_flag():
    assert IniConfig.from_env({ENV_NOSECTION_COMPAT: "yes"}).nosection_compat is True
    assert IniConfig.from_env({ENV_NOSECTION_COMPAT: " 0 "}).nosection_compat is False
    assert IniConfig.from_env({}).nosection_compat is False


def test_from_env_uses_process_environment(monkeypatch):
    monkeypatch.setenv(ENV_NOSECTION_COMPAT, "on")
    assert IniConfig.from_env().nosection_compat is True


def test_from_env_ignores_unknown_values(caplog):
    with caplog.at_level(logging.WARNING, logger="pyinifile.config"):
        cfg = IniConfig.from_env({ENV_NOSECTION_COMPAT: "maybe"})
    assert cfg == DEFAULT_CONFIG
    assert ENV_NOSECTION_COMPAT in caplog.text
