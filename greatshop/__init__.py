"""Terminal shop that browses a fixed product catalogue and demonstrates sorting algorithms on it."""

__version__ = "0.1.0"