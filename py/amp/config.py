# Copyright (c) 2025 Old River Creative. MIT LICENSE.
#
# Clone and equality policy.
#
# CLONE_JSON reproduces the legacy behavior: values go through a JSON
# round trip, so anything JSON cannot hold is coerced or rejected.
# CLONE_STRUCTURAL works on the in-memory value tree directly.


from typing import *
import logging
import os


logger = logging.getLogger(__name__)

CLONE_JSON = 'json'
CLONE_STRUCTURAL = 'structural'

CLONE_MODES = (CLONE_JSON, CLONE_STRUCTURAL)

# Environment variable consulted once, at import.
S_ENV_CLONE_MODE = 'AMP_CLONE_MODE'


def _check_mode(mode: Any) -> str:
    if mode not in CLONE_MODES:
        raise ValueError(
            f'Unknown clone mode: {mode!r} (expected one of: {", ".join(CLONE_MODES)})')
    return mode


def mode_from_env(value: Optional[str]) -> str:
    """
    Default mode from an AMP_CLONE_MODE value. Unset or blank means
    CLONE_JSON; an unknown value is logged and also means CLONE_JSON.
    """
    mode = (value or '').strip().lower()
    if '' == mode:
        return CLONE_JSON
    if mode not in CLONE_MODES:
        logger.warning('Ignoring %s=%r (expected one of: %s)',
                       S_ENV_CLONE_MODE, value, ', '.join(CLONE_MODES))
        return CLONE_JSON
    return mode


_clone_mode = mode_from_env(os.environ.get(S_ENV_CLONE_MODE))


def get_clone_mode() -> str:
    "Current default mode for clone and equal."
    return _clone_mode


def set_clone_mode(mode: str) -> str:
    """
    Change the default mode for clone and equal. Returns the previous
    mode, so callers can restore it.
    """
    global _clone_mode
    prior = _clone_mode
    _clone_mode = _check_mode(mode)
    logger.debug('clone mode: %s -> %s', prior, _clone_mode)
    return prior


def resolve_mode(mode: Optional[str] = None) -> str:
    "Per-call mode if given, else the default."
    if mode is None:
        return _clone_mode
    return _check_mode(mode)


__all__ = [
    'CLONE_JSON',
    'CLONE_MODES',
    'CLONE_STRUCTURAL',
    'get_clone_mode',
    'mode_from_env',
    'resolve_mode',
    'set_clone_mode',
]
