from typing import Callable, Optional

import pytest

from holdem.deck import parse_cards
from holdem.player import Player


@pytest.fixture
def make_player() -> Callable[..., Player]:
    """Factory for creating Player objects, optionally holding hole cards."""

    def _factory(name: str, chips: int = 1000, hand: Optional[str] = None, *, state: str = "active") -> Player:
        player = Player(name, chips=chips)
        if hand is not None:
            player.hand = parse_cards(hand)
        player.state = state
        return player

    return _factory


@pytest.fixture(autouse=True)
def clean_table_environment(monkeypatch, tmp_path):
    """Keep HOLDEM_* variables and any stray .env file out of the tests."""
    for key in ("HOLDEM_PLAYERS", "HOLDEM_STARTING_CHIPS", "HOLDEM_SEED"):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
