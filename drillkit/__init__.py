"""Load, compile, run and verify a course of small exercises, with worked lesson solutions."""

__version__ = "0.1.0"