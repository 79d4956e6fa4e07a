import os
from pathlib import Path

import yaml

CONFIG_PATH = Path(__file__).resolve().parents[2] / "config" / "keyvalues_parser.yml"
CONFIG_ENV_VAR = "KEYVALUES_PARSER_CONFIG"

class KVConfig:
    def __init__(self, data):
        self.paths = data.get("paths", {})
        self.parser = data.get("parser", {})
        self.logging = data.get("logging", {})
        self.debug = data.get("debug", False)

def config_path() -> Path:
    override = os.environ.get(CONFIG_ENV_VAR)
    return Path(override) if override else CONFIG_PATH

def load_config() -> 'KVConfig':
    path = config_path()
    if not path.exists():
        # Installed without the project tree: console logging only.
        return KVConfig({"logging": {"to_file": False}})

    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    return KVConfig(data)

_config_cache = None

def get_config() -> 'KVConfig':
    global _config_cache
    if _config_cache is None:
        _config_cache = load_config()
    return _config_cache
