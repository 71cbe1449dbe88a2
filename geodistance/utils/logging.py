"""Logging utility for geodistance"""

__all__ = ['LOGGER']

import logging

LOGGER = logging.getLogger('geodistance')
LOGGER.setLevel(logging.WARNING)
_LOG_HANDLER = logging.StreamHandler()
_LOG_HANDLER.setFormatter(logging.Formatter('[%(levelname)s] %(name)s: %(message)s'))
LOGGER.addHandler(_LOG_HANDLER)
