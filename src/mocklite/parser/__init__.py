"""click parameter types used by the mocklite command line."""

from .logger import LoggerParser

__all__ = ["LoggerParser"]
