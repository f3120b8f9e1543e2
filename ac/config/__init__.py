"""Configuration Package

Settings come from the environment only; ac never reads or writes a
config file.
"""

import os
import sys
from dataclasses import dataclass, asdict
from typing import Mapping, Optional

# Valid configuration values
VALID_MODES = {"ac", "c", "a"}

ENV_PREFIX = "AC_"
TRUE_VALUES = {"1", "true", "yes", "on"}
FALSE_VALUES = {"0", "false", "no", "off", ""}


@dataclass
class Config:
    """Runtime configuration with sensible defaults."""
    mode: str = "ac"
    allow_empty: bool = True
    verbose: bool = False

    def to_dict(self) -> dict:
        return {k: v for k, v in asdict(self).items() if v is not None}

    def validate(self) -> list[str]:
        """Validate config values and return list of warnings.

        Invalid values are replaced with defaults after warning.
        """
        warnings = []
        defaults = Config()

        if self.mode not in VALID_MODES:
            warnings.append(f"Invalid mode '{self.mode}', using '{defaults.mode}'")
            self.mode = defaults.mode

        if not isinstance(self.allow_empty, bool):
            warnings.append(f"Invalid allow_empty '{self.allow_empty}', using {str(defaults.allow_empty).lower()}")
            self.allow_empty = defaults.allow_empty

        if not isinstance(self.verbose, bool):
            warnings.append(f"Invalid verbose '{self.verbose}', using {str(defaults.verbose).lower()}")
            self.verbose = defaults.verbose

        return warnings

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> 'Config':
        """Read AC_MODE, AC_ALLOW_EMPTY and AC_VERBOSE."""
        environ = os.environ if environ is None else environ
        data = {}
        for name in (f.name for f in cls.__dataclass_fields__.values()):
            raw = environ.get(f"{ENV_PREFIX}{name.upper()}")
            if raw is None:
                continue
            data[name] = _parse_bool(raw) if name != "mode" else raw.strip()

        config = cls(**data)
        for warning in config.validate():
            print(f"Config warning: {warning}", file=sys.stderr)
        return config


def _parse_bool(raw: str):
    """'1'/'true'/'yes'/'on' -> True, '0'/'false'/'no'/'off' -> False, else raw."""
    value = raw.strip().lower()
    if value in TRUE_VALUES:
        return True
    if value in FALSE_VALUES:
        return False
    return raw


def load_config() -> Config:
    return Config.from_env()


__all__ = [
    "Config",
    "load_config",
    "VALID_MODES",
]
