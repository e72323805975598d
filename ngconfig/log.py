"""
Logging setup for programs embedding ngconfig.

Library modules log through loguru's ``logger`` and bind a ``scope`` extra
(``local`` or ``global``) when a message concerns one config file. Records
without a scope show ``-``.
"""

import sys
from typing import Optional

from loguru import logger

from ngconfig.core.config.settings import get_settings

DEFAULT_SCOPE = "-"

VERBOSE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<magenta>{extra[scope]: <6}</magenta> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)
SHORT_FORMAT = "<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | <level>{message}</level>"


def setup_logging(verbose: Optional[bool] = None) -> None:
    """Replace loguru's sinks with a single stderr sink.

    Args:
        verbose: Show debug records with their scope and origin
            (defaults to NGCONFIG_DEBUG)
    """
    if verbose is None:
        verbose = get_settings().debug

    logger.remove()
    logger.configure(extra={"scope": DEFAULT_SCOPE})

    if verbose:
        logger.add(sys.stderr, level="DEBUG", format=VERBOSE_FORMAT)
    else:
        logger.add(sys.stderr, level="INFO", format=SHORT_FORMAT)
