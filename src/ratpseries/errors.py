# -*- coding: utf-8 - vim: tw=80
r"""
Error kinds

All failures of the series operations are reported by raising one of the
exceptions below. They all derive from :class:`SeriesError`, so that callers
(typically a series driver that may retry at a different expansion point) can
catch them as a group.

EXAMPLES::

    sage: from ratpseries.errors import *
    sage: issubclass(DivisionByZero, ZeroDivisionError)
    True
    sage: issubclass(NoExactRoot, ValueError)
    True
    sage: all(issubclass(cls, SeriesError) for cls in
    ....:     [UnsupportedBranch, PuiseuxUnsupported, NoExactRoot, DivisionByZero])
    True
"""

# Copyright 2026 The ratpseries developers
#
# Distributed under the terms of the GNU General Public License (GPL) either
# version 2, or (at your option) any later version
#
# http://www.gnu.org/licenses/

__all__ = ["SeriesError", "UnsupportedBranch", "PuiseuxUnsupported",
           "NoExactRoot", "DivisionByZero"]

class SeriesError(ArithmeticError):
    pass

class UnsupportedBranch(SeriesError, NotImplementedError):
    r"""
    The expansion exists only on a branch (or at a point) that is not
    handled, e.g. ``sin(c + ...)`` with `c \neq 0`.
    """
    pass

class PuiseuxUnsupported(SeriesError, NotImplementedError):
    r"""
    The result would involve fractional powers of the variable.
    """
    pass

class NoExactRoot(SeriesError, ValueError):
    pass

class DivisionByZero(SeriesError, ZeroDivisionError):
    r"""
    Inversion of a series with zero constant term (the result would be a
    Laurent series).
    """
    pass
