from dataclasses import dataclass, fields
from enum import Enum
from importlib.util import module_from_spec, spec_from_file_location
from types import ModuleType
from typing import Optional

from rpncalc.errors import ConfigError


class LogLevel(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


@dataclass
class Config:
    prompt: str = ""
    show_postfix: bool = False
    skip_blank_lines: bool = True
    log_level: LogLevel = LogLevel.WARNING


def load(filename: Optional[str]) -> Config:
    cfg = Config()

    if filename:
        # Load module from the path given
        spec = spec_from_file_location("rpncalc_config", filename)
        if spec is None or spec.loader is None:
            raise ConfigError(f"can not load configuration from {filename}")
        mod = module_from_spec(spec)
        spec.loader.exec_module(mod)

        types = {f.name: f.type for f in fields(Config)}

        # For each top level attr in the module, overwrite attr in config
        for k, v in mod.__dict__.items():
            if k.startswith("_") or isinstance(v, ModuleType):
                continue
            if k not in types:
                raise ConfigError(f"unknown configuration option: {k}")
            if types[k] in (bool, str) and not isinstance(v, types[k]):
                raise ConfigError(
                    f"{k} must be a {types[k].__name__}, not {type(v).__name__}"
                )
            setattr(cfg, k, v)

        if not isinstance(cfg.log_level, LogLevel):
            try:
                cfg.log_level = LogLevel(str(cfg.log_level).upper())
            except ValueError:
                raise ConfigError(f"invalid log level: {cfg.log_level}") from None

    return cfg
