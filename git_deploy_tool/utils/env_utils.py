"""Environment-style value expansion"""

import os
from typing import Any, Mapping, Optional, Union

from ..constants import ENV_PLACEHOLDER_PATTERN

_BOOLEAN_VALUES = {
    'true': True,
    'false': False,
}


def parse_env(value: Any,
              environ: Optional[Mapping[str, str]] = None) -> Optional[Union[str, bool]]:
    """
    Expand ``$NAME`` / ``${NAME}`` placeholders in a configured value

    A value consisting of a single placeholder resolves to the variable's
    value, with ``"true"``/``"false"`` converted to booleans. Placeholders
    embedded in a longer string are substituted in place.

    Args:
        value: Raw configured value
        environ: Variables to resolve against (defaults to ``os.environ``)

    Returns:
        Expanded value, or None when the value is not a string or a
        referenced variable is not set
    """
    if not isinstance(value, str):
        return None

    env = os.environ if environ is None else environ

    match = ENV_PLACEHOLDER_PATTERN.fullmatch(value)
    if match:
        name = match.group(1) or match.group(2)
        if name not in env:
            return None
        resolved = env[name]
        return _BOOLEAN_VALUES.get(resolved.lower(), resolved)

    missing = []

    def _substitute(m):
        name = m.group(1) or m.group(2)
        if name not in env:
            missing.append(name)
            return m.group(0)
        return env[name]

    expanded = ENV_PLACEHOLDER_PATTERN.sub(_substitute, value)

    if missing:
        return None

    return expanded


def parse_env_string(value: Any,
                     environ: Optional[Mapping[str, str]] = None) -> str:
    """
    Expand a value that must be a string

    Returns:
        Expanded string, or an empty string when expansion did not yield one
    """
    parsed = parse_env(value, environ)

    if not isinstance(parsed, str):
        return ''

    return parsed
