# -*- coding: utf-8 - vim: tw=80
r"""
Ring backends

The special functions of :mod:`ratpseries.special` only talk to a *ring
backend*, an object implementing the primitive operations on truncated
polynomials with rational coefficients listed in :class:`RingBackend`. The
backend used by default, :class:`FlintBackend`, works with the FLINT-based
univariate polynomials over `\QQ` of SageMath.

All truncated operations take a precision ``prec`` and return polynomials of
degree less than ``prec``; coefficients of the inputs in degree ``prec`` and
above are ignored.

EXAMPLES::

    sage: from ratpseries.backend import get_backend
    sage: Pol.<x> = QQ[]
    sage: B = get_backend(x); B
    FLINT series backend for Univariate Polynomial Ring in x over Rational Field
    sage: B.mul_trunc(1 + x, 1 - x + x^2, 3)
    1
    sage: B.inv_trunc(1 - x, 4)
    x^3 + x^2 + x + 1
    sage: B.exp_trunc(x, 4)
    1/6*x^3 + 1/2*x^2 + x + 1
    sage: B.inv_trunc(x, 4)
    Traceback (most recent call last):
    ...
    ratpseries.errors.DivisionByZero: cannot invert a series with zero constant term (Laurent series are not supported)
"""

# Copyright 2026 The ratpseries developers
#
# Distributed under the terms of the GNU General Public License (GPL) either
# version 2, or (at your option) any later version
#
# http://www.gnu.org/licenses/

import logging

from fractions import Fraction

from sage.misc.cachefunc import cached_function
from sage.rings.polynomial.polynomial_element import Polynomial
from sage.rings.polynomial.polynomial_ring_constructor import PolynomialRing
from sage.rings.rational_field import QQ
from sage.structure.element import parent

from .errors import DivisionByZero, NoExactRoot, UnsupportedBranch

logger = logging.getLogger(__name__)

class RingBackend(object):
    r"""
    Truncated polynomial arithmetic over `\QQ` in one variable.

    Subclasses implement the primitive operations; :meth:`pow_trunc` and
    :meth:`compose_trunc` are derived from :meth:`mul_trunc`.

    The ``*_trunc`` elementary functions follow the usual conventions for
    series: :meth:`inv_trunc` requires a nonzero constant term,
    :meth:`log_trunc` a constant term equal to one, and all others a zero
    constant term.
    """

    # Construction and conversion

    def element(self, data):
        r"""
        Convert ``data`` (polynomial, list or dict of exact rationals) to a
        polynomial of this backend.
        """
        raise NotImplementedError

    def rational(self, c):
        r"""
        Convert ``c`` to an exact rational, or raise a ``TypeError``.
        """
        raise NotImplementedError

    def zero(self):
        raise NotImplementedError

    def one(self):
        raise NotImplementedError

    def gen(self):
        raise NotImplementedError

    # Queries

    def coeff(self, a, i):
        raise NotImplementedError

    def degree(self, a):
        r"""
        Degree of ``a`` as a polynomial, `-1` for zero.
        """
        raise NotImplementedError

    def valuation(self, a, prec):
        r"""
        Lowest degree of a nonzero coefficient of ``a`` below ``prec``, or
        ``prec`` if there is none.
        """
        raise NotImplementedError

    # Additive structure

    def truncate(self, a, prec):
        raise NotImplementedError

    def shift(self, a, k):
        r"""
        Multiply ``a`` by `x^k`, dropping the terms of negative degree.
        """
        raise NotImplementedError

    def add(self, a, b):
        raise NotImplementedError

    def sub(self, a, b):
        raise NotImplementedError

    def neg(self, a):
        raise NotImplementedError

    def scalar_mul(self, a, c):
        raise NotImplementedError

    def scalar_div(self, a, c):
        raise NotImplementedError

    # Truncated operations

    def mul_trunc(self, a, b, prec):
        raise NotImplementedError

    def inv_trunc(self, a, prec):
        raise NotImplementedError

    def exp_trunc(self, a, prec):
        raise NotImplementedError

    def log_trunc(self, a, prec):
        raise NotImplementedError

    def sin_trunc(self, a, prec):
        raise NotImplementedError

    def cos_trunc(self, a, prec):
        raise NotImplementedError

    def tan_trunc(self, a, prec):
        raise NotImplementedError

    def asin_trunc(self, a, prec):
        raise NotImplementedError

    def asinh_trunc(self, a, prec):
        raise NotImplementedError

    def atan_trunc(self, a, prec):
        raise NotImplementedError

    def atanh_trunc(self, a, prec):
        raise NotImplementedError

    def sinh_trunc(self, a, prec):
        raise NotImplementedError

    def cosh_trunc(self, a, prec):
        raise NotImplementedError

    def tanh_trunc(self, a, prec):
        raise NotImplementedError

    def revert_trunc(self, a, prec):
        r"""
        Compositional inverse of ``a`` modulo `x^{prec}`.
        """
        raise NotImplementedError

    def derivative(self, a):
        raise NotImplementedError

    def integral(self, a):
        raise NotImplementedError

    # Scalars

    def nth_root(self, c, n):
        r"""
        Exact rational ``n``-th root of the rational ``c``; raise
        :class:`~ratpseries.errors.NoExactRoot` if there is none.
        """
        raise NotImplementedError

    # Derived operations

    def pow_trunc(self, a, n, prec):
        r"""
        Compute `a^n` modulo `x^{prec}` by repeated squaring.

        Negative exponents go through :meth:`inv_trunc`.
        """
        if n < 0:
            a = self.inv_trunc(a, prec)
            n = -n
        res = self.truncate(self.one(), prec)
        a = self.truncate(a, prec)
        while n:
            if n & 1:
                res = self.mul_trunc(res, a, prec)
            n >>= 1
            if n:
                a = self.mul_trunc(a, a, prec)
        return res

    def compose_trunc(self, a, b, prec):
        r"""
        Compute `a(b)` modulo `x^{prec}` by Horner's rule.

        The caller is responsible for ``b`` having a zero constant term if
        ``a`` is to be understood as a truncated series.
        """
        res = self.zero()
        one = self.one()
        for i in range(min(self.degree(a), prec - 1), -1, -1):
            res = self.mul_trunc(res, b, prec)
            res = self.add(res, self.scalar_mul(one, self.coeff(a, i)))
        return res

class FlintBackend(RingBackend):
    r"""
    Ring backend based on the FLINT polynomials ``fmpq_poly`` underlying
    univariate polynomial rings over `\QQ` in SageMath.

    INPUT:

    - ``ring`` -- a univariate polynomial ring over `\QQ` (with the default
      FLINT implementation), or the name of its variable

    EXAMPLES::

        sage: from ratpseries.backend import FlintBackend
        sage: B = FlintBackend('t'); B
        FLINT series backend for Univariate Polynomial Ring in t over Rational Field
        sage: t = B.gen()
        sage: B.element([1, 1/2, 0, 3])
        3*t^3 + 1/2*t + 1
        sage: B.element({5: 2})
        2*t^5
        sage: B.valuation(t^3 + t^5, 4)
        3
        sage: B.valuation(t^5, 4)
        4
        sage: B.shift(t + t^3, -1)
        t^2 + 1
        sage: B.nth_root(-8/27, 3)
        -2/3
        sage: B.nth_root(2, 2)
        Traceback (most recent call last):
        ...
        ratpseries.errors.NoExactRoot: constant term 2 has no exact rational root of order 2

    TESTS::

        sage: FlintBackend(ZZ['t'])
        Traceback (most recent call last):
        ...
        TypeError: expected a univariate polynomial ring over QQ, got Univariate Polynomial Ring in t over Integer Ring
        sage: B.element([1, 0.5])
        Traceback (most recent call last):
        ...
        TypeError: 0.500000000000000 is not an exact rational number
        sage: from fractions import Fraction
        sage: B.element([Fraction(1, 3)])
        1/3
        sage: B.pow_trunc(1 + t, 5, 3)
        10*t^2 + 5*t + 1
        sage: B.pow_trunc(1 + t, -2, 3)
        3*t^2 - 2*t + 1
        sage: B.pow_trunc(1 + t, 0, 0)
        0
        sage: B.compose_trunc(1 + t + t^2, t + t^2, 3)
        2*t^2 + t + 1
    """

    def __init__(self, ring='x'):
        if isinstance(ring, str):
            ring = PolynomialRing(QQ, ring)
        try:
            Pol = PolynomialRing(QQ, ring.variable_name())
        except (AttributeError, ValueError):
            Pol = None
        if Pol is not ring:
            raise TypeError("expected a univariate polynomial ring over QQ, "
                            "got {}".format(ring))
        self.Pol = Pol

    def __repr__(self):
        return "FLINT series backend for {}".format(self.Pol)

    def element(self, data):
        if isinstance(data, dict):
            data = {int(k): self.rational(c) for k, c in data.items()}
        elif isinstance(data, (list, tuple)):
            data = [self.rational(c) for c in data]
        elif parent(data) is self.Pol:
            return data
        else:
            try:
                return self.Pol.coerce(data)
            except TypeError:
                data = self.rational(data)
        return self.Pol(data)

    def rational(self, c):
        if isinstance(c, Fraction):
            return QQ((c.numerator, c.denominator))
        try:
            return QQ.coerce(c)
        except TypeError:
            raise TypeError("{} is not an exact rational number".format(c)
                            ) from None

    def zero(self):
        return self.Pol.zero()

    def one(self):
        return self.Pol.one()

    def gen(self):
        return self.Pol.gen()

    def coeff(self, a, i):
        return a[i]

    def degree(self, a):
        return a.degree()

    def valuation(self, a, prec):
        a = a.truncate(prec)
        return prec if a.is_zero() else a.valuation()

    def truncate(self, a, prec):
        return a.truncate(max(prec, 0))

    def shift(self, a, k):
        return a.shift(k)

    def add(self, a, b):
        return a + b

    def sub(self, a, b):
        return a - b

    def neg(self, a):
        return -a

    def scalar_mul(self, a, c):
        return self.rational(c)*a

    def scalar_div(self, a, c):
        c = self.rational(c)
        if c.is_zero():
            raise ZeroDivisionError("division of a series by zero")
        return a*~c

    def mul_trunc(self, a, b, prec):
        if prec <= 0:
            return self.Pol.zero()
        return a._mul_trunc_(b, prec)

    def inv_trunc(self, a, prec):
        if a[0].is_zero():
            raise DivisionByZero("cannot invert a series with zero constant "
                                 "term (Laurent series are not supported)")
        if prec <= 0:
            return self.Pol.zero()
        return a.inverse_series_trunc(prec)

    def _elementary(self, name, a, prec, const=0):
        # FLINT's *_series functions take the constant term of the result as
        # given, so the argument must be at the expansion point of the branch
        # they implement.
        if a[0] != const:
            if const:
                raise UnsupportedBranch("{}() requires constant term {}, got {}"
                                        .format(name, const, a[0]))
            raise UnsupportedBranch("{}(const) not implemented".format(name))
        if prec <= 0:
            return self.Pol.zero()
        return getattr(a, "_{}_series".format(name))(prec)

    def exp_trunc(self, a, prec):
        return self._elementary("exp", a, prec)

    def log_trunc(self, a, prec):
        return self._elementary("log", a, prec, const=1)

    def sin_trunc(self, a, prec):
        return self._elementary("sin", a, prec)

    def cos_trunc(self, a, prec):
        return self._elementary("cos", a, prec)

    def tan_trunc(self, a, prec):
        return self._elementary("tan", a, prec)

    def asin_trunc(self, a, prec):
        return self._elementary("asin", a, prec)

    def asinh_trunc(self, a, prec):
        return self._elementary("asinh", a, prec)

    def atan_trunc(self, a, prec):
        return self._elementary("atan", a, prec)

    def atanh_trunc(self, a, prec):
        return self._elementary("atanh", a, prec)

    def sinh_trunc(self, a, prec):
        return self._elementary("sinh", a, prec)

    def cosh_trunc(self, a, prec):
        return self._elementary("cosh", a, prec)

    def tanh_trunc(self, a, prec):
        return self._elementary("tanh", a, prec)

    def revert_trunc(self, a, prec):
        if not a[0].is_zero():
            raise UnsupportedBranch("reversion of a series with nonzero "
                                    "constant term not implemented")
        if a[1].is_zero():
            raise DivisionByZero("cannot revert a series with zero linear "
                                 "coefficient")
        if prec <= 0:
            return self.Pol.zero()
        return a.revert_series(prec)

    def derivative(self, a):
        return a.derivative()

    def integral(self, a):
        return a.integral()

    def nth_root(self, c, n):
        c = self.rational(c)
        try:
            return c.nth_root(n)
        except ValueError:
            raise NoExactRoot("constant term {} has no exact rational root "
                              "of order {}".format(c, n)) from None

@cached_function
def _flint_backend(name):
    logger.debug("creating FLINT backend for variable %s", name)
    return FlintBackend(name)

def get_backend(s):
    r"""
    Return the (cached) default backend for series in the variable of ``s``.

    Data without a polynomial parent (lists, dicts, rational constants) is
    read as a series in `x`.

    TESTS::

        sage: from ratpseries.backend import get_backend
        sage: get_backend(ZZ['y'].gen()) is get_backend(QQ['y'].gen())
        True
        sage: Bx = get_backend(QQ['x'].gen())
        sage: all(get_backend(s) is Bx for s in [int(3), 1/2, [1, 1], (0, 2),
        ....:                                    {1: 1}])
        True
        sage: from fractions import Fraction
        sage: get_backend(Fraction(1, 3)) is Bx
        True
    """
    if isinstance(s, Polynomial):
        name = s.variable_name()
    else:
        name = 'x'
    return _flint_backend(name)
