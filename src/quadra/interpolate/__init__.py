"""
###########################################################
Interpolation and extrapolation (:mod:`quadra.interpolate`)
###########################################################

.. currentmodule:: quadra.interpolate

This module provides incremental tableaux that turn a sequence of estimates into a
faster-converging one by polynomial or rational extrapolation.

Polynomial interpolation
========================

.. autosummary::
    :toctree: generated/

    lagrange
    neville
    neville_fold
    modified_neville
    modified_neville_fold

Rational interpolation
======================

.. autosummary::
    :toctree: generated/

    modified_bulirsch_stoer
    modified_bulirsch_stoer_fold

Richardson extrapolation
========================

.. autosummary::
    :toctree: generated/

    richardson_column
    richardson_sequence
    richardson_tableau

Tableaux
========

.. autosummary::
    :toctree: generated/

    Fold
    TableauFold
    first_terms
    tableau_columns

Exceptions
==========

.. autosummary::
    :toctree: generated/

    TableauError
    DegenerateAbscissaError
    RationalPoleError

"""

from .polynomial import (
    lagrange,
    modified_neville,
    modified_neville_fold,
    neville,
    neville_fold,
)
from .rational import modified_bulirsch_stoer, modified_bulirsch_stoer_fold
from .richardson import richardson_column, richardson_sequence, richardson_tableau
from .tableau import (
    DegenerateAbscissaError,
    Fold,
    RationalPoleError,
    TableauError,
    TableauFold,
    first_terms,
    tableau_columns,
)

__all__ = [
    "lagrange",
    "modified_neville",
    "modified_neville_fold",
    "neville",
    "neville_fold",
    "modified_bulirsch_stoer",
    "modified_bulirsch_stoer_fold",
    "richardson_column",
    "richardson_sequence",
    "richardson_tableau",
    "DegenerateAbscissaError",
    "Fold",
    "RationalPoleError",
    "TableauError",
    "TableauFold",
    "first_terms",
    "tableau_columns",
]
