"""
Tuple Log

Schema-inferring, append-only tuple store with a replayable action log.
"""

__version__ = "0.1.0"
