"""Heads-up push/fold and 6-max preflop Hold'em game models, strategy extraction and job bookkeeping."""

__version__ = "0.1.0"