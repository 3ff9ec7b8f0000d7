"""
Table settings for the demo round.
Values come from the process environment, then a .env file, then defaults.
"""

import os
from typing import Any, Dict, List, Optional

from dotenv import dotenv_values

from .player import DEFAULT_CHIPS
from .version import get_version_info


DEFAULT_PLAYERS = "Alice,Bob"


def load_env_file(filepath: str = ".env") -> Dict[str, str]:
    """Load key/value pairs from a .env file (missing file -> empty)."""
    if not os.path.exists(filepath):
        return {}
    return {k: v for k, v in dotenv_values(filepath).items() if v is not None}


def _lookup(key: str, env_vars: Dict[str, str], default: Optional[str] = None) -> Optional[str]:
    return os.getenv(key) or env_vars.get(key, default)


def parse_player_names(raw: str) -> List[str]:
    names = [name.strip() for name in raw.split(',')]
    return [name for name in names if name]


def get_settings(env_file: str = ".env") -> Dict[str, Any]:
    """Get the table settings plus version information."""
    env_vars = load_env_file(env_file)

    players = parse_player_names(_lookup('HOLDEM_PLAYERS', env_vars, DEFAULT_PLAYERS))
    chips_raw = _lookup('HOLDEM_STARTING_CHIPS', env_vars, str(DEFAULT_CHIPS))
    seed_raw = _lookup('HOLDEM_SEED', env_vars)

    try:
        chips = int(chips_raw)
        seed = int(seed_raw) if seed_raw else None
    except ValueError as e:
        raise ValueError(f"Invalid table setting: {e}") from e

    return {
        'players': players,
        'starting_chips': chips,
        'seed': seed,
        **get_version_info(),
    }
