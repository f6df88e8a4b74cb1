import copy
import os
import json


config_content = {
  "server": {
    "host": "0.0.0.0",
    "backlog": 10,
    "buffer_size": 1024,
    "max_handlers": None,
    "log_file": "log.txt"
  },
  "client": {
    "host": "127.0.0.1"
  },
  "log": {
    "file": None,
    "level": 20,
    "_comment": "logging.INFO"
  }
}


def default_config():
    return copy.deepcopy(config_content)


def load_config(filename="config.json"):
    """
    Read the JSON config and lay it over the defaults.
    A missing file leaves the defaults untouched.
    """
    config = default_config()
    if filename and os.path.exists(filename):
        with open(filename, "r") as f:
            loaded = json.load(f)
        for section, values in loaded.items():
            if isinstance(values, dict) and isinstance(config.get(section), dict):
                config[section].update(values)
            else:
                config[section] = values
    return config


def setup_config_json(config_file='config.json'):
    location = os.path.abspath(config_file)
    exists = os.path.exists(location)
    if not exists:
        with open(location, 'w') as fhandle:
            json.dump(config_content, fhandle, indent=2)
    return location, exists
