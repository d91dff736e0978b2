"""
#############################################
Numerical quadrature (:mod:`quadra.integrate`)
#############################################

.. currentmodule:: quadra.integrate

This module provides integrators that refine estimates until they converge, adaptive
bisection, and substitutions for improper integrals.

Definite integrals
==================

.. autosummary::
    :toctree: generated/

    definite_integral
    get_integrator
    available_methods
    resolve
    Named
    Direct
    WithOptions

Configuration
=============

.. autosummary::
    :toctree: generated/

    Options
    options
    Integrator
    make_integrator

Adaptive and improper integration
=================================

.. autosummary::
    :toctree: generated/

    adaptive
    improper
    open_form
    classify
    infinitize
    inverse_power_law_lower
    inverse_power_law_upper
    inverse_sqrt_lower
    inverse_sqrt_upper
    exponential_upper
    get_substitution

Integration rules
=================

.. autosummary::
    :toctree: generated/

    bulirsch_stoer
    midpoint
    newtoncotes
    riemann
    romberg
    trapezoid

"""

from . import bulirsch_stoer, midpoint, newtoncotes, riemann, romberg, trapezoid
from .adaptive import adaptive
from .common import Integrator, Options, make_integrator, options
from .improper import classify, improper, open_form
from .quad import (
    Direct,
    Named,
    WithOptions,
    available_methods,
    definite_integral,
    get_integrator,
    resolve,
)
from .substitute import (
    exponential_upper,
    get_substitution,
    infinitize,
    inverse_power_law_lower,
    inverse_power_law_upper,
    inverse_sqrt_lower,
    inverse_sqrt_upper,
)

__all__ = [
    "bulirsch_stoer",
    "midpoint",
    "newtoncotes",
    "riemann",
    "romberg",
    "trapezoid",
    "adaptive",
    "Integrator",
    "Options",
    "make_integrator",
    "options",
    "classify",
    "improper",
    "open_form",
    "Direct",
    "Named",
    "WithOptions",
    "available_methods",
    "definite_integral",
    "get_integrator",
    "resolve",
    "exponential_upper",
    "get_substitution",
    "infinitize",
    "inverse_power_law_lower",
    "inverse_power_law_upper",
    "inverse_sqrt_lower",
    "inverse_sqrt_upper",
]
