import yaml
import os

TRUE_VALUES = ("1", "true", "yes", "on")


def get_config(path=None):
    """
    Loads YAML configuration from either:
      - explicit path argument, or
      - environment variable RSA_KEYLOADER_CONFIG, or
      - default file ./config.yaml
    """
    path = path or os.getenv("RSA_KEYLOADER_CONFIG", "config.yaml")
    if not os.path.exists(path):
        raise FileNotFoundError(f"Config file not found: {path}")
    with open(path) as f:
        return yaml.safe_load(f) or {}


def get_key_config(path=None):
    """
    Get key loading settings from environment variables or config file.
    Returns dict with public/private key paths, strategy name and pair-check flag.
    """
    cfg = get_config(path)
    keys = cfg.get("keys") or {}

    verify_pair = os.getenv("RSA_KEYLOADER_VERIFY_PAIR")
    if verify_pair is None:
        verify_pair = keys.get("verify_pair", False)
    else:
        verify_pair = verify_pair.strip().lower() in TRUE_VALUES

    return {
        "public_key_path": os.getenv("RSA_KEYLOADER_PUBLIC_KEY", keys.get("public_key_path")),
        "private_key_path": os.getenv("RSA_KEYLOADER_PRIVATE_KEY", keys.get("private_key_path")),
        "strategy": os.getenv("RSA_KEYLOADER_STRATEGY", keys.get("strategy", "pkcs8")),
        "verify_pair": bool(verify_pair),
    }
