"""Dark Junqi game logic: board, rules, game turns and computer opponents."""

__version__ = "0.1.0"