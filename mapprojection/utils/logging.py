"""
Package logger for mapprojection. Warnings about degraded results (e.g. out-of-range
scales) are emitted once per process; latitude clamping is reported at DEBUG.
"""

__all__ = ['LOGGER', 'reset_warnings', 'warn_once']

import logging

LOGGER = logging.getLogger('mapprojection')
LOGGER.setLevel(logging.WARNING)
_LOG_HANDLER = logging.StreamHandler()
_LOG_HANDLER.setFormatter(logging.Formatter('[%(levelname)s] %(name)s: %(message)s'))
LOGGER.addHandler(_LOG_HANDLER)

_EMITTED_WARNINGS = set()


def warn_once(warning: str):
    """Logs a warning only the first time a given message is seen"""
    if warning in _EMITTED_WARNINGS:
        return

    LOGGER.warning(warning)
    _EMITTED_WARNINGS.add(warning)


def reset_warnings():
    """Forgets previously emitted warnings, so that they will be logged again"""
    _EMITTED_WARNINGS.clear()
