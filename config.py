import json
import os
from pathlib import Path

_DEFAULT_CONFIG = Path(__file__).parent / "config.json"
CONFIG_ENV = "XID_CONFIG"


class GeneratorConfig:
    __slots__ = ("hostname",)

    def __init__(self, hostname=None):
        # None means ask the OS
        self.hostname = hostname


class ServerConfig:
    __slots__ = ("host", "port", "max_batch")

    def __init__(self, host="127.0.0.1", port=8080, max_batch=1000):
        self.host = host
        self.port = port
        self.max_batch = max_batch


class LoggingConfig:
    __slots__ = ("level",)

    def __init__(self, level="INFO"):
        self.level = level


class Config:
    __slots__ = ("generator", "server", "logging")

    def __init__(self, generator=None, server=None, logging=None):
        self.generator = generator or GeneratorConfig()
        self.server = server or ServerConfig()
        self.logging = logging or LoggingConfig()

    @classmethod
    def from_dict(cls, d):
        return cls(
            GeneratorConfig(**d.get("generator", {})),
            ServerConfig(**d.get("server", {})),
            LoggingConfig(**d.get("logging", {})),
        )


def load_config(path=None):
    if path is None:
        path = os.environ.get(CONFIG_ENV)
    config_path = Path(path) if path else _DEFAULT_CONFIG

    if not config_path.exists():
        return Config()

    with open(config_path) as file:
        return Config.from_dict(json.load(file))
