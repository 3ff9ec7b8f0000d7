"""Exceptions raised by the Hold'em engine."""


class InvalidInput(ValueError):
    """Raised when the evaluator is handed cards that break its contract
    (wrong number of cards, unknown rank or suit)."""
