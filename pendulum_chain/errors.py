#!/usr/bin/env python3
"""
Exception types raised by the pendulum chain core.
"""


class PendulumChainError(Exception):
    """Base class for chain errors surfaced to the control panel."""


class InvalidGeometry(PendulumChainError, ValueError):
    """A numeric input was NaN, infinite or not a number at all."""


class SegmentNotFound(PendulumChainError, LookupError):
    """The segment passed to a chain operation is not part of that chain."""


class InvalidLink(PendulumChainError, ValueError):
    """Linking two segments would turn the chain into a cycle."""
