from __future__ import annotations
import os


_TRUTHY = {'1', 'true', 'yes', 'on'}
_FALSY = {'0', 'false', 'no', 'off', ''}

# Defaults
DEFAULT_STRICT = False
DEFAULT_MAX_DEPTH = 100
DEFAULT_PROMPT = '>>> '


def flag_from_env(var: str, default: bool) -> bool:
    raw = os.environ.get(var)
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in _TRUTHY:
        return True
    if value in _FALSY:
        return False
    return default


def int_from_env(var: str, default: int) -> int:
    raw = os.environ.get(var)
    if not raw:
        return default
    try:
        value = int(raw.strip())
    except ValueError:
        return default
    return value if value > 0 else default


def get_strict() -> bool:
    return flag_from_env('FUNDOT_STRICT', DEFAULT_STRICT)


def get_max_depth() -> int:
    return int_from_env('FUNDOT_MAX_DEPTH', DEFAULT_MAX_DEPTH)


def get_prompt() -> str:
    return os.environ.get('FUNDOT_PROMPT', DEFAULT_PROMPT)
