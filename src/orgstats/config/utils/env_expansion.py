"""Environment variable expansion for configuration values."""

import os
import re
from typing import Any, Dict

# ${VAR:default} - the default may be empty
_DEFAULTED_VAR = re.compile(r"\$\{([A-Za-z_][A-Za-z0-9_]*):([^}]*)\}")


def _expand_string(value: str) -> str:
    value = _DEFAULTED_VAR.sub(lambda m: os.environ.get(m.group(1), m.group(2)), value)
    return os.path.expandvars(value)


def expand_env_vars(value: Any) -> Any:
    """
    Recursively expand environment variables in strings, dicts and lists.

    Supports ``$VAR``, ``${VAR}`` and ``${VAR:default}``. Variables that are not
    set and have no default are left untouched.
    """
    if isinstance(value, str):
        return _expand_string(value)
    if isinstance(value, dict):
        return {key: expand_env_vars(item) for key, item in value.items()}
    if isinstance(value, list):
        return [expand_env_vars(item) for item in value]
    return value


def expand_config_env_vars(config: Dict[str, Any]) -> Dict[str, Any]:
    """Expand environment variables across a whole configuration dictionary."""
    return expand_env_vars(config)
