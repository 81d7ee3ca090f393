import copy
import json
import os
import sys

DEFAULT_CONFIG = {
    "general": {
        "download_dir": "./downloads",
        "history_file": "~/.s3console_history",
        "verbose": False,
    },
    "s3": {
        "region": None,
        "endpoint_url": None,
        "profile": None,
    },
}


def default_config_path():
    return os.path.join(os.path.expanduser("~"), ".s3console", "config.json")


def load_config(config_path=None):
    """Load config from file, merge with defaults."""
    if config_path is None:
        config_path = default_config_path()

    config = copy.deepcopy(DEFAULT_CONFIG)

    if os.path.exists(config_path):
        try:
            with open(config_path, 'r') as f:
                user_config = json.load(f)
            if not isinstance(user_config, dict):
                raise ValueError("top-level value must be an object")
            # Merge user config over defaults
            for section, values in user_config.items():
                if section in config and isinstance(config[section], dict) and isinstance(values, dict):
                    config[section].update(values)
                else:
                    config[section] = values
        except (json.JSONDecodeError, OSError, ValueError) as e:
            print(f"Warning: Could not load config from {config_path}: {e}", file=sys.stderr)
            config = copy.deepcopy(DEFAULT_CONFIG)

    return config


def get_download_dir(config):
    return config.get("general", {}).get("download_dir") or DEFAULT_CONFIG["general"]["download_dir"]


def get_history_file(config):
    path = config.get("general", {}).get("history_file") or DEFAULT_CONFIG["general"]["history_file"]
    return os.path.expanduser(path)


def is_verbose(config):
    return bool(config.get("general", {}).get("verbose", False))
