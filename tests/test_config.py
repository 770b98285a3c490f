import pytest

from rsa_keyloader.utils.config import get_config, get_key_config

CONFIG = """
keys:
  public_key_path: keys/public.pem
  private_key_path: keys/private.pem
  strategy: pkcs1
  verify_pair: true
"""


@pytest.fixture
def config_file(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text(CONFIG)
    return path


def test_missing_config_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        get_config(str(tmp_path / "nope.yaml"))


def test_config_from_env_path(config_file, monkeypatch):
    monkeypatch.setenv("RSA_KEYLOADER_CONFIG", str(config_file))
    assert get_config()["keys"]["strategy"] == "pkcs1"


def test_key_config_from_file(config_file):
    assert get_key_config(str(config_file)) == {
        "public_key_path": "keys/public.pem",
        "private_key_path": "keys/private.pem",
        "strategy": "pkcs1",
        "verify_pair": True,
    }


def test_key_config_env_overrides(config_file, monkeypatch):
    monkeypatch.setenv("RSA_KEYLOADER_PUBLIC_KEY", "/etc/keys/pub.pem")
    monkeypatch.setenv("RSA_KEYLOADER_STRATEGY", "pkcs8-public")
    monkeypatch.setenv("RSA_KEYLOADER_VERIFY_PAIR", "no")
    cfg = get_key_config(str(config_file))
    assert cfg["public_key_path"] == "/etc/keys/pub.pem"
    assert cfg["private_key_path"] == "keys/private.pem"
    assert cfg["strategy"] == "pkcs8-public"
    assert cfg["verify_pair"] is False


def test_key_config_defaults(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("")
    assert get_key_config(str(path)) == {
        "public_key_path": None,
        "private_key_path": None,
        "strategy": "pkcs8",
        "verify_pair": False,
    }


def test_logger_level_from_env(monkeypatch):
    import logging

    from rsa_keyloader.utils.logger import get_logger

    monkeypatch.setenv("RSA_KEYLOADER_LOG_LEVEL", "debug")
    logger = get_logger("rsa_keyloader.test_env_level")
    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 1
    assert get_logger("rsa_keyloader.test_env_level").handlers == logger.handlers
