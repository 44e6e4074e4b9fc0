"""
Centralized logging using Loguru with context-aware verbosity.

This module provides a LOG() function that respects the current state's
verbosity level without requiring explicit state passing.

Features:
- Context-aware logging tied to the caller's state verbosity
- Falls back to ECOMCON_VERBOSITY when no state is connected
- Thread-safe using contextvars
- Disabled on import (library convention); call logging_configure() or
  logger.enable("ecomcon") to see output

Usage:
    from ecomcon.lib.log import LOG, logging_configure, state_connectToLogger

    # Once, in the host program:
    logging_configure()

    # At the start of a build step:
    state_connectToLogger(state)

    # Anywhere in that context:
    LOG("This message appears if verbosity >= 1", level=1)
    LOG("Stage summaries appear if verbosity >= 2", level=2)
    LOG("Per-line decisions appear if verbosity >= 3", level=3)
"""

from loguru import logger
from typing import Any, Optional
from contextvars import ContextVar
import sys

from ..config import appsettings

# Context variable to hold the caller's current state
_program_state: ContextVar[Optional[Any]] = ContextVar('program_state', default=None)

# Configure loguru with ecomcon-specific format
logger_format = (
    "<green>{time:HH:mm:ss}</green> │ "
    "<level>{level: <5}</level> │ "
    "<cyan>{function: <20}</cyan> @ "
    "<cyan>{line: <4}</cyan> ║ "
    "<level>{message}</level>"
)

# Silent until the caller opts in; host sinks are left alone
logger.disable("ecomcon")


def logging_configure(sink: Any = sys.stderr, level: str = "DEBUG") -> int:
    """
    Enable ecomcon log output and attach a sink in the ecomcon format.

    Existing sinks are kept. Messages still pass the verbosity gate in LOG().

    Args:
        sink: Any loguru sink (stream, path, callable)
        level: Minimum loguru level for the new sink

    Returns:
        Handler id, for logger.remove() when the caller is done
    """
    logger.enable("ecomcon")
    return logger.add(sink, format=logger_format, level=level)


def state_connectToLogger(state: Any) -> None:
    """
    Connect a state object to the logging context.

    Any object with a ``verbosity`` attribute works (a TransformState, an
    argparse Namespace from a build tool, ...).

    Args:
        state: Object carrying a verbosity attribute, or None to disconnect
    """
    _program_state.set(state)


def verbosity_current() -> int:
    """Verbosity of the connected state, else the configured default"""
    state = _program_state.get()
    if state is not None and hasattr(state, 'verbosity'):
        return state.verbosity
    return appsettings.verbosity


def LOG(message: str, level: int = 1, **kwargs: Any) -> None:
    """
    Log message if current verbosity allows.

    Args:
        message: Log message to display
        level: Minimum verbosity level required (1=normal, 2=verbose, 3=debug)
        **kwargs: Additional loguru metadata

    Example:
        LOG("Split 42 lines", level=2)
        LOG("line 7: tag 'debug' active, unwrapped", level=3)
    """
    if verbosity_current() >= level:
        logger.opt(depth=1).debug(message, **kwargs)
