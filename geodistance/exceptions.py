"""Exceptions raised by geodistance"""

__all__ = ['GeodistanceError', 'InvalidCoordinate']


class GeodistanceError(Exception):
    """Base class for all geodistance errors"""


class InvalidCoordinate(GeodistanceError, ValueError):
    """A latitude or longitude is missing, unparseable, or out of range"""
