"""Solver settings read from the environment and an optional .env file."""

import logging
import os
from dataclasses import dataclass, replace
from typing import Optional

from dotenv import load_dotenv

DEFAULT_ITERATION_CAP = 10000
DEFAULT_MODULUS = 8

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}
_UNBOUNDED_VALUES = {"0", "none", "unbounded"}


@dataclass(frozen=True)
class SolverSettings:
    iteration_cap: Optional[int] = DEFAULT_ITERATION_CAP
    add_self_loops: bool = True
    default_modulus: int = DEFAULT_MODULUS
    log_level: str = "WARNING"

    def with_overrides(self, **overrides) -> "SolverSettings":
        return replace(self, **{key: value for key, value in overrides.items() if value is not None})


def load_settings(dotenv_path: Optional[str] = None) -> SolverSettings:
    load_dotenv(dotenv_path)
    return SolverSettings(
        iteration_cap=_parse_cap(os.getenv("GRAPH_PUZZLE_ITERATION_CAP")),
        add_self_loops=_parse_bool("GRAPH_PUZZLE_ADD_SELF_LOOPS", os.getenv("GRAPH_PUZZLE_ADD_SELF_LOOPS")),
        default_modulus=_parse_modulus(os.getenv("GRAPH_PUZZLE_DEFAULT_MODULUS")),
        log_level=_parse_log_level(os.getenv("GRAPH_PUZZLE_LOG_LEVEL")),
    )


def _parse_cap(raw: Optional[str]) -> Optional[int]:
    if raw is None or not raw.strip():
        return DEFAULT_ITERATION_CAP
    text = raw.strip().lower()
    if text in _UNBOUNDED_VALUES:
        return None
    try:
        value = int(text)
    except ValueError:
        raise ValueError(f"GRAPH_PUZZLE_ITERATION_CAP must be an integer, got {raw!r}") from None
    if value < 0:
        raise ValueError(f"GRAPH_PUZZLE_ITERATION_CAP must not be negative, got {value}")
    return value


def _parse_bool(name: str, raw: Optional[str]) -> bool:
    if raw is None or not raw.strip():
        return True
    text = raw.strip().lower()
    if text in _TRUE_VALUES:
        return True
    if text in _FALSE_VALUES:
        return False
    raise ValueError(f"{name} must be a boolean flag, got {raw!r}")


def _parse_modulus(raw: Optional[str]) -> int:
    if raw is None or not raw.strip():
        return DEFAULT_MODULUS
    try:
        value = int(raw.strip())
    except ValueError:
        raise ValueError(f"GRAPH_PUZZLE_DEFAULT_MODULUS must be an integer, got {raw!r}") from None
    if value <= 0:
        raise ValueError(f"GRAPH_PUZZLE_DEFAULT_MODULUS must be positive, got {value}")
    return value


def _parse_log_level(raw: Optional[str]) -> str:
    if raw is None or not raw.strip():
        return "WARNING"
    level = raw.strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ValueError(f"GRAPH_PUZZLE_LOG_LEVEL is not a logging level: {raw!r}")
    return level
