"""Courtroom model: people, evidence, judges, trials and lawyer strategies."""

__version__ = "0.1.0"