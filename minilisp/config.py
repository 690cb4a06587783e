from __future__ import annotations
import os

# Defaults
DEFAULT_PROMPT = "LISP> "
DEFAULT_RECURSION_LIMIT = 10_000


def value_from_env(var: str, default: str) -> str:
    raw = os.environ.get(var)
    if not raw:
        return default
    return raw


def get_prompt() -> str:
    return value_from_env('MINILISP_PROMPT', DEFAULT_PROMPT)


def get_recursion_limit() -> int:
    raw = value_from_env('MINILISP_RECURSION_LIMIT', str(DEFAULT_RECURSION_LIMIT))
    try:
        limit = int(raw)
    except ValueError:
        return DEFAULT_RECURSION_LIMIT
    return limit if limit > 0 else DEFAULT_RECURSION_LIMIT
