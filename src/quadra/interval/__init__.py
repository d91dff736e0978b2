"""
###################################
Intervals (:mod:`quadra.interval`)
###################################

.. currentmodule:: quadra.interval

This module describes which endpoints of an integration range may be evaluated.

.. autosummary::
    :toctree: generated/

    Boundary
    Interval

Constants
=========

============== ========================================
``OPEN``        both endpoints are excluded
``CLOSED``      both endpoints are included
``CLOSED_OPEN`` only the left endpoint is included
``OPEN_CLOSED`` only the right endpoint is included
============== ========================================

"""

from .interval import CLOSED, CLOSED_OPEN, OPEN, OPEN_CLOSED, Boundary, Interval

__all__ = [
    "Boundary",
    "Interval",
    "CLOSED",
    "CLOSED_OPEN",
    "OPEN",
    "OPEN_CLOSED",
]
