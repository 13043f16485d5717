"""
Centralized logging using Loguru with context-aware verbosity.

The LOG() function respects the verbosity connected to the current context,
so lib modules can log without passing state around. The verbosity lives
in a ContextVar, which keeps concurrent renders on separate threads or tasks
from seeing each other's settings.

Usage:
    from mdhtml.lib.log import LOG, verbosity_connect

    # At start of a pipeline function:
    verbosity_connect(state)

    # Anywhere in that context:
    LOG("Rendered 3 paragraphs", level=2)
    LOG("Line 4 classified as header", level=3)
"""

import sys
from contextvars import ContextVar
from typing import Any

from loguru import logger

_verbosity: ContextVar[int] = ContextVar("mdhtml_verbosity", default=0)

logger_format = (
    "<green>{time:HH:mm:ss}</green> │ "
    "<level>{level: <5}</level> │ "
    "<cyan>{module: <10}</cyan>:<cyan>{function: <18}</cyan> ║ "
    "<level>{message}</level>"
)

logger.remove()
logger.add(sys.stderr, format=logger_format, level="DEBUG")


def verbosity_connect(state: Any) -> None:
    """
    Make a verbosity level available to LOG() in the current context.

    Args:
        state: An int, or any object with a ``verbosity`` attribute
               (e.g., ProgramState)
    """
    level = state if isinstance(state, int) else getattr(state, "verbosity", 0)
    _verbosity.set(level)


def LOG(message: str, level: int = 1, **kwargs: Any) -> None:
    """
    Log message if the connected verbosity allows.

    Args:
        message: Log message to display
        level: Minimum verbosity level required (1=normal, 2=verbose, 3=trace)
        **kwargs: Additional loguru arguments passed through to logger.debug
    """
    if _verbosity.get() >= level:
        logger.opt(depth=1).debug(message, **kwargs)
