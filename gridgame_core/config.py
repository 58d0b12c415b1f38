from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional


def _int_or_none(value: Optional[str]) -> Optional[int]:
    if value is None or value.strip() == '':
        return None
    try:
        return int(value)
    except ValueError:
        return None


@dataclass(frozen=True)
class Settings:
    """Runtime settings read from the environment; CLI flags take precedence."""
    lang: Optional[str]
    log_level: str
    seed: Optional[int]


def load_settings() -> Settings:
    return Settings(
        lang=os.getenv('GRIDGAME_LANG') or None,
        log_level=(os.getenv('GRIDGAME_LOG_LEVEL') or 'WARNING').upper(),
        seed=_int_or_none(os.getenv('GRIDGAME_SEED')),
    )
