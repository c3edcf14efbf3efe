import json
from pathlib import Path

from identifiers.limits import MAX_BYTES, Precision, check_length, min_bytes

_DEFAULT_CONFIG = Path(__file__).parent / "config.json"


class IdConfig:
    __slots__ = ("default_bytes", "precision", "ordered", "max_batch")

    def __init__(self, default_bytes=10, precision="seconds", ordered=True, max_batch=100):
        self.precision = Precision.parse(precision)
        # must fit both random and ordered ids
        self.default_bytes = check_length(default_bytes, min_bytes(self.precision), MAX_BYTES)
        self.ordered = bool(ordered)
        if max_batch < 1:
            raise ValueError(f"max_batch must be positive, got {max_batch}")
        self.max_batch = max_batch

    def to_dict(self):
        return {
            "default_bytes": self.default_bytes,
            "precision": self.precision.value,
            "ordered": self.ordered,
            "max_batch": self.max_batch,
        }


class ServerConfig:
    __slots__ = ("host", "port")

    def __init__(self, host="127.0.0.1", port=8080):
        self.host = host
        self.port = port


class LoggingConfig:
    __slots__ = ("level", "crash_file")

    def __init__(self, level="INFO", crash_file="logs/crash.log"):
        self.level = level
        self.crash_file = crash_file


class Config:
    __slots__ = ("ids", "server", "logging")

    def __init__(self, ids=None, server=None, logging=None):
        self.ids = ids or IdConfig()
        self.server = server or ServerConfig()
        self.logging = logging or LoggingConfig()

    @classmethod
    def from_dict(cls, d):
        return cls(
            IdConfig(**d.get("ids", {})),
            ServerConfig(**d.get("server", {})),
            LoggingConfig(**d.get("logging", {})),
        )


def load_config(path=None):
    config_path = Path(path) if path else _DEFAULT_CONFIG

    if not config_path.exists():
        return Config()

    with open(config_path) as file:
        return Config.from_dict(json.load(file))
