# idn_normalizer/config.py

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import find_dotenv, load_dotenv


ENV_PREFIX = "IDN_NORMALIZER_"

_TRUE_VALUES = ("1", "true", "yes", "on")
_FALSE_VALUES = ("0", "false", "no", "off")


@dataclass(frozen=True)
class IdnaOptions:
    """
    Flags handed to idna.encode when a host is converted.

    uts46 applies the UTS #46 mapping (case folding, width mapping) before
    encoding, which is what browsers do. transitional and std3_rules are
    only meaningful when uts46 is on.
    """
    uts46: bool = True
    transitional: bool = False
    std3_rules: bool = False


DEFAULT_OPTIONS = IdnaOptions()


def _parse_bool(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ValueError(f"{name} must be a boolean (got {raw!r})")


def load_options(env_file: Optional[str] = None) -> IdnaOptions:
    """
    Builds IdnaOptions from the environment, reading a .env file first.

    Args:
        env_file: Path to the .env file (default: nearest .env above the working directory)

    Returns:
        IdnaOptions: Options with unset variables left at their defaults

    Raises:
        ValueError: If a variable is set to something that is not a boolean
    """
    load_dotenv(env_file or find_dotenv(usecwd=True))

    values = {}
    for field in ("uts46", "transitional", "std3_rules"):
        name = ENV_PREFIX + field.upper()
        raw = os.getenv(name)
        if raw is not None and raw.strip():
            values[field] = _parse_bool(name, raw)

    return IdnaOptions(**values)
