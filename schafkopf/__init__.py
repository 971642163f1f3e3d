"""Rules, trick evaluation, a computer opponent and table layout for the card game Schafkopf."""

__version__ = "0.1.0"