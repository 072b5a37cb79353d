# -*- coding: utf-8 - vim: tw=80
r"""
Truncated power series of special functions

This module computes expansions at the origin of composite functions
`f(s(x))`, where `s` is a power series with rational coefficients given by a
polynomial and `f` is an algebraic or elementary function, modulo `x^{prec}`.
The n-th root and the Lambert W function are computed by Newton iteration on
top of the primitives of a :mod:`ring backend <ratpseries.backend>`, sine and
cosine of series of low degree by a direct summation of their Taylor series,
and all other functions are delegated to the backend.

All functions take the series ``s`` (a polynomial, or anything the backend can
convert to one), the precision ``prec`` and, where applicable, an integer
parameter, and return a new polynomial of degree less than ``prec``. None of
them modifies its arguments. Failures are reported by the exceptions of
:mod:`ratpseries.errors`.

EXAMPLES::

    sage: from ratpseries.special import *
    sage: Pol.<x> = QQ[]
    sage: nthroot(1 + x, 4, 2)
    1/16*x^3 - 1/8*x^2 + 1/2*x + 1
    sage: lambertw(x, 5)
    -8/3*x^4 + 3/2*x^3 - x^2 + x
    sage: sin_series(x, 6)
    1/120*x^5 - 1/6*x^3 + x
    sage: cos_series(x, 6)
    1/24*x^4 - 1/2*x^2 + 1

The functions without an algorithm of their own delegate to the backend::

    sage: exp_series(x, 4)
    1/6*x^3 + 1/2*x^2 + x + 1
    sage: log_series(1 + x, 4)
    1/3*x^3 - 1/2*x^2 + x
    sage: tan_series(x, 6)
    2/15*x^5 + 1/3*x^3 + x
    sage: atan_series(x, 6)
    1/5*x^5 - 1/3*x^3 + x
    sage: atanh_series(x, 6)
    1/5*x^5 + 1/3*x^3 + x
    sage: asin_series(x, 6)
    3/40*x^5 + 1/6*x^3 + x
    sage: asinh_series(x, 6)
    3/40*x^5 - 1/6*x^3 + x
    sage: sinh_series(x, 6)
    1/120*x^5 + 1/6*x^3 + x
    sage: cosh_series(x, 6)
    1/24*x^4 + 1/2*x^2 + 1
    sage: tanh_series(x, 6)
    2/15*x^5 - 1/3*x^3 + x

and inherit its preconditions::

    sage: log_series(2 + x, 4)
    Traceback (most recent call last):
    ...
    ratpseries.errors.UnsupportedBranch: log() requires constant term 1, got 2
    sage: exp_series(1 + x, 4)
    Traceback (most recent call last):
    ...
    ratpseries.errors.UnsupportedBranch: exp(const) not implemented
    sage: acos_series(x, 4)
    Traceback (most recent call last):
    ...
    ratpseries.errors.UnsupportedBranch: acos() not implemented

Inputs are converted to rational polynomials when possible::

    sage: nthroot(ZZ['x']([4, 4]), 3, 2)
    -1/4*x^2 + x + 2
    sage: exp_series(RR['x']([0, 0.5]), 3)
    Traceback (most recent call last):
    ...
    TypeError: 0.500000000000000*x is not an exact rational number
"""

# Copyright 2026 The ratpseries developers
#
# Distributed under the terms of the GNU General Public License (GPL) either
# version 2, or (at your option) any later version
#
# http://www.gnu.org/licenses/

import logging

from sage.rings.integer_ring import ZZ

from .context import dctx
from .errors import DivisionByZero, PuiseuxUnsupported, UnsupportedBranch
from .newton import newton_steps

logger = logging.getLogger(__name__)

__all__ = ["nthroot", "lambertw", "sin_series", "cos_series",
           "inv_series", "exp_series", "log_series", "tan_series",
           "atan_series", "atanh_series", "asin_series", "asinh_series",
           "acos_series", "sinh_series", "cosh_series", "tanh_series",
           "reverse_series", "pow_series", "diff_series", "integrate_series",
           "subs_series", "series_function", "apply_series"]

def _setup(s, prec, ctx):
    Ring = ctx.backend_for(s)
    prec = ZZ(prec)
    if prec < 0:
        raise ValueError("precision must be nonnegative, got {}".format(prec))
    return Ring, Ring.element(s), int(prec)

def _check_zero_constant_term(Ring, s, name):
    if Ring.coeff(s, 0) != 0:
        raise UnsupportedBranch("{}(const) not implemented".format(name))

################################################################################
# Algebraic functions
################################################################################

def nthroot(s, prec, n, ctx=dctx):
    r"""
    Compute the ``n``-th root `s^{1/n}` of a series.

    INPUT:

    - ``s`` -- series, with a valuation divisible by ``n`` and a constant term
      (after division by the lowest power of `x`) that is an ``n``-th power in
      `\QQ`
    - ``prec`` -- nonnegative integer
    - ``n`` -- nonzero integer; ``n = 0`` is accepted and yields `1`
    - ``ctx`` -- :class:`~ratpseries.context.Context`

    OUTPUT:

    A polynomial `r` of degree less than ``prec`` such that
    `r^n = s \bmod x^{prec}`. When ``s`` has a negative constant term and
    ``n`` is odd, the real root is used.
    If ``s`` has valuation `v > 0`, the input only determines `r` modulo
    `x^{prec - v + v/n}`, and no terms beyond that are returned.

    ALGORITHM:

    After dividing out the lowest power of `x` and the constant term, Newton
    iteration on `y^{|n|} s_1 = 1`, whose solution is `y = s_1^{-1/|n|}`. This
    avoids inverting the current approximation at every step. Each step works
    at its own precision from :func:`~ratpseries.newton.newton_steps`.

    EXAMPLES::

        sage: from ratpseries.special import nthroot, pow_series
        sage: Pol.<x> = QQ[]
        sage: nthroot(1 + x, 4, 2)
        1/16*x^3 - 1/8*x^2 + 1/2*x + 1
        sage: nthroot(8 - 8*x, 3, 3)
        -2/9*x^2 - 2/3*x + 2
        sage: nthroot(-27 + x, 2, 3)
        1/27*x - 3
        sage: nthroot(4 + 4*x, 3, -2)
        3/16*x^2 - 1/4*x + 1/2
        sage: nthroot(x^2 + x^3, 4, 2)
        1/2*x^2 + x

    Lists, dicts and rational constants are read as series in `x`::

        sage: nthroot([1, 1], 4, 2)
        1/16*x^3 - 1/8*x^2 + 1/2*x + 1
        sage: nthroot({0: 9, 2: 9}, 3, -2)
        -1/6*x^2 + 1/3
        sage: from fractions import Fraction
        sage: nthroot(Fraction(4, 9), 3, 2)
        2/3
        sage: from ratpseries.special import exp_series
        sage: exp_series({1: 1}, 3)
        1/2*x^2 + x + 1

    Series that do not have an expansion of the supported form::

        sage: nthroot(x, 6, 2)
        Traceback (most recent call last):
        ...
        ratpseries.errors.PuiseuxUnsupported: Puiseux series not implemented (valuation 1 is not divisible by 2)
        sage: nthroot(x, 6, 3)
        Traceback (most recent call last):
        ...
        ratpseries.errors.PuiseuxUnsupported: Puiseux series not implemented (valuation 1 is not divisible by 3)
        sage: nthroot(2 + x, 4, 2)
        Traceback (most recent call last):
        ...
        ratpseries.errors.NoExactRoot: constant term 2 has no exact rational root of order 2
        sage: nthroot(-4 + x, 4, 2)
        Traceback (most recent call last):
        ...
        ratpseries.errors.NoExactRoot: constant term -4 has no exact rational root of order 2
        sage: nthroot(x^2 + x^3, 4, -2)
        Traceback (most recent call last):
        ...
        ratpseries.errors.DivisionByZero: result has valuation -1 (Laurent series are not supported)

    TESTS::

        sage: s = 1 + 2*x - x^3 + 5*x^4
        sage: all(pow_series(nthroot(s, prec, n), prec, n) == s.truncate(prec)
        ....:     for n in [1, 2, 3, -1, -2, 5, -7] for prec in [1, 2, 5, 12, 33])
        True
        sage: s = 9/4 - x/3 + 7*x^10
        sage: all(pow_series(nthroot(s, prec, n), prec, n) == s.truncate(prec)
        ....:     for n in [2, -2] for prec in range(1, 20))
        True
        sage: s = 1/8*x^6 + x^7 - x^9
        sage: all(pow_series(nthroot(s, prec, 3), prec, 3) == s.truncate(prec)
        ....:     for prec in range(15))
        True

    When the valuation is positive, only the terms determined by the
    truncated input are returned::

        sage: from ratpseries.special import sin_series
        sage: all(nthroot(pow_series(sin_series(x, prec), prec, 2), prec, 2)
        ....:     == sin_series(x, prec - 1) for prec in range(3, 12))
        True
        sage: nthroot(x^3*(8 + x), 8, 3).degree()
        5

        sage: s = 1 + x
        sage: nthroot(s, 3, 1) is s
        True
        sage: nthroot(s, 3, 0)
        1
        sage: nthroot(s, 5, -1) == s.inverse_series_trunc(5)
        True
        sage: nthroot(s, 0, 2)
        0
        sage: nthroot(x^5, 4, 3)
        0
        sage: nthroot(x^5, 4, -3)
        Traceback (most recent call last):
        ...
        ratpseries.errors.DivisionByZero: cannot take a negative power of a series that is zero to precision 4
        sage: nthroot(1 + x, 4, 1/2)
        Traceback (most recent call last):
        ...
        TypeError: no conversion of this rational to integer
        sage: nthroot(1 + x, -5, 1)
        Traceback (most recent call last):
        ...
        ValueError: precision must be nonnegative, got -5

        sage: from ratpseries.context import Context
        sage: nthroot(1 + x, 6, 3, ctx=Context(check=True))
        22/729*x^5 - 10/243*x^4 + 5/81*x^3 - 1/9*x^2 + 1/3*x + 1
    """
    Ring, s, prec = _setup(s, prec, ctx)
    n = ZZ(n)
    if n == 0:
        return Ring.one()
    if n == 1:
        return s
    if n == -1:
        return inv_series(s, prec, ctx=ctx)
    if prec == 0:
        return Ring.zero()

    ldeg = Ring.valuation(s, prec)
    if ldeg == prec:
        # s is zero to the precision we care about
        if n > 0:
            return Ring.zero()
        raise DivisionByZero("cannot take a negative power of a series that "
                             "is zero to precision {}".format(prec))
    if ldeg % n != 0:
        raise PuiseuxUnsupported("Puiseux series not implemented (valuation "
                                 "{} is not divisible by {})".format(ldeg, n))
    val = ldeg // n
    if val < 0:
        raise DivisionByZero("result has valuation {} (Laurent series are "
                             "not supported)".format(val))
    m = abs(n)
    # s/x^ldeg, hence its root, is only known to precision prec - ldeg.
    uprec = prec - ldeg

    ss = Ring.shift(Ring.truncate(s, prec), -ldeg)
    ct = Ring.coeff(ss, 0)
    ctroot = Ring.nth_root(ct, m)
    sn = Ring.scalar_div(ss, ct)

    res = Ring.one()
    for step in newton_steps(uprec):
        logger.debug("nthroot: n=%s, step=%s", n, step)
        t = Ring.mul_trunc(Ring.pow_trunc(res, m + 1, step), sn, step)
        res = Ring.add(res, Ring.scalar_div(Ring.sub(res, t), m))

    if n < 0:
        res = Ring.scalar_div(res, ctroot)
    else:
        res = Ring.scalar_mul(Ring.inv_trunc(res, uprec), ctroot)
        res = Ring.shift(res, val)

    if ctx.check:
        assert Ring.pow_trunc(res, n, prec) == Ring.truncate(s, prec)
    return res

def lambertw(s, prec, ctx=dctx):
    r"""
    Compute the principal branch `W(s)` of the Lambert W function of a series
    with zero constant term.

    The result `p` satisfies `p e^p = s \bmod x^{prec}`. It is computed by
    Newton iteration on `p e^p - s` starting from `p = 0`, each step working at
    its own precision from :func:`~ratpseries.newton.newton_steps`.

    EXAMPLES::

        sage: from ratpseries.special import lambertw, exp_series
        sage: Pol.<x> = QQ[]
        sage: lambertw(x, 7)
        -54/5*x^6 + 125/24*x^5 - 8/3*x^4 + 3/2*x^3 - x^2 + x
        sage: lambertw(-x, 7) == lambertw(x, 7)(-x)
        True
        sage: lambertw(1 + x, 3)
        Traceback (most recent call last):
        ...
        ratpseries.errors.UnsupportedBranch: lambertw(const) not implemented

    TESTS::

        sage: s = x + 3*x^2 - x^5/7
        sage: all((p*exp_series(p, prec)).truncate(prec) == s.truncate(prec)
        ....:     for prec in [4, 8, 16, 32] for p in [lambertw(s, prec)])
        True

    Small precisions, where the first working precision is the target::

        sage: [lambertw(x, prec) for prec in range(4)]
        [0, 0, x, -x^2 + x]
        sage: all((p*exp_series(p, prec)).truncate(prec) == s.truncate(prec)
        ....:     for prec in range(1, 11) for p in [lambertw(s, prec)])
        True
    """
    Ring, s, prec = _setup(s, prec, ctx)
    _check_zero_constant_term(Ring, s, "lambertw")
    s = Ring.truncate(s, prec)
    one = Ring.one()
    p = Ring.zero()
    for step in newton_steps(prec):
        logger.debug("lambertw: step=%s", step)
        e = Ring.exp_trunc(p, step)
        p2 = Ring.sub(Ring.mul_trunc(e, p, step), Ring.truncate(s, step))
        p3 = Ring.inv_trunc(Ring.mul_trunc(e, Ring.add(p, one), step), step)
        p = Ring.sub(p, Ring.mul_trunc(p2, p3, step))
    return p

################################################################################
# Sine and cosine
################################################################################

def sin_series(s, prec, ctx=dctx):
    r"""
    Compute `\sin(s)` for a series ``s`` with zero constant term.

    When ``s`` has low degree as a polynomial (see
    :class:`~ratpseries.context.Context`), sum the Taylor series of `\sin`
    directly: each term costs one truncated multiplication by `s^2` and one
    rational division. Otherwise, use the backend.

    EXAMPLES::

        sage: from ratpseries.special import sin_series, cos_series
        sage: Pol.<x> = QQ[]
        sage: sin_series(x - x^3/6, 4)
        -1/3*x^3 + x
        sage: _ == (x - x^3/6)._sin_series(4)
        True
        sage: sin_series(1 + x, 4)
        Traceback (most recent call last):
        ...
        ratpseries.errors.UnsupportedBranch: sin(const) not implemented

    TESTS:

    Both code paths agree with the backend::

        sage: s = x + 2*x^2 - x^3/3 + x^9 - x^11/5 + 7*x^12
        sage: ts = [s.truncate(d) for d in range(2, 14)]
        sage: all(sin_series(t, prec) == t._sin_series(prec)
        ....:     for t in ts for prec in [1, 2, 7, 10, 20])
        True
        sage: from ratpseries.context import Context
        sage: ctx = Context(sincos_algorithm="taylor")
        sage: all(sin_series(t, prec, ctx=ctx) == t._sin_series(prec)
        ....:     for t in ts for prec in [3, 20])
        True
        sage: all((sin_series(t, 15)^2 + cos_series(t, 15)^2).truncate(15) == 1
        ....:     for t in ts)
        True
        sage: sin_series(x^20, 10)
        0
    """
    Ring, s, prec = _setup(s, prec, ctx)
    _check_zero_constant_term(Ring, s, "sin")
    if prec == 0:
        return Ring.zero()
    s = Ring.truncate(s, prec)
    if not ctx.use_taylor_sincos(Ring.degree(s)):
        logger.debug("sin: degree %s, using backend", Ring.degree(s))
        return Ring.sin_trunc(s, prec)

    ssquare = Ring.mul_trunc(s, s, prec)
    monom = s
    res = Ring.zero()
    prod = Ring.rational(1)
    for i in range(prec // 2):
        j = 2*i + 1
        if i != 0:
            prod /= 1 - j
        prod /= j
        res = Ring.add(res, Ring.scalar_mul(monom, prod))
        monom = Ring.mul_trunc(monom, ssquare, prec)
    return res

def cos_series(s, prec, ctx=dctx):
    r"""
    Compute `\cos(s)` for a series ``s`` with zero constant term.

    See :func:`sin_series`.

    EXAMPLES::

        sage: from ratpseries.special import cos_series
        sage: Pol.<x> = QQ[]
        sage: cos_series(x + x^2, 5)
        -11/24*x^4 - x^3 - 1/2*x^2 + 1
        sage: cos_series(x + x^2, 5) == (x + x^2)._cos_series(5)
        True
        sage: cos_series(2 + x, 3)
        Traceback (most recent call last):
        ...
        ratpseries.errors.UnsupportedBranch: cos(const) not implemented

    TESTS::

        sage: s = x - 3*x^2 + x^5/2 + x^9 + 1/11*x^10
        sage: ts = [s.truncate(d) for d in range(2, 11)]
        sage: all(cos_series(t, prec) == t._cos_series(prec)
        ....:     for t in ts for prec in [1, 2, 3, 8, 17])
        True
        sage: cos_series(x, 1), cos_series(x, 0)
        (1, 0)
    """
    Ring, s, prec = _setup(s, prec, ctx)
    _check_zero_constant_term(Ring, s, "cos")
    if prec == 0:
        return Ring.zero()
    s = Ring.truncate(s, prec)
    if not ctx.use_taylor_sincos(Ring.degree(s)):
        logger.debug("cos: degree %s, using backend", Ring.degree(s))
        return Ring.cos_trunc(s, prec)

    ssquare = Ring.mul_trunc(s, s, prec)
    monom = ssquare
    res = Ring.one()
    prod = Ring.rational(1)
    for i in range(1, prec // 2 + 1):
        j = 2*i
        prod /= 1 - j
        prod /= j
        res = Ring.add(res, Ring.scalar_mul(monom, prod))
        monom = Ring.mul_trunc(monom, ssquare, prec)
    return res

################################################################################
# Functions computed by the backend
################################################################################

def inv_series(s, prec, ctx=dctx):
    r"""
    Compute `1/s`.

    EXAMPLES::

        sage: from ratpseries.special import inv_series
        sage: Pol.<x> = QQ[]
        sage: inv_series(1 - x, 4)
        x^3 + x^2 + x + 1
        sage: inv_series(x + x^2, 4)
        Traceback (most recent call last):
        ...
        ratpseries.errors.DivisionByZero: cannot invert a series with zero constant term (Laurent series are not supported)
    """
    Ring, s, prec = _setup(s, prec, ctx)
    return Ring.inv_trunc(s, prec)

def exp_series(s, prec, ctx=dctx):
    Ring, s, prec = _setup(s, prec, ctx)
    return Ring.exp_trunc(s, prec)

def log_series(s, prec, ctx=dctx):
    Ring, s, prec = _setup(s, prec, ctx)
    return Ring.log_trunc(s, prec)

def tan_series(s, prec, ctx=dctx):
    Ring, s, prec = _setup(s, prec, ctx)
    return Ring.tan_trunc(s, prec)

def atan_series(s, prec, ctx=dctx):
    Ring, s, prec = _setup(s, prec, ctx)
    return Ring.atan_trunc(s, prec)

def atanh_series(s, prec, ctx=dctx):
    Ring, s, prec = _setup(s, prec, ctx)
    return Ring.atanh_trunc(s, prec)

def asin_series(s, prec, ctx=dctx):
    Ring, s, prec = _setup(s, prec, ctx)
    return Ring.asin_trunc(s, prec)

def asinh_series(s, prec, ctx=dctx):
    Ring, s, prec = _setup(s, prec, ctx)
    return Ring.asinh_trunc(s, prec)

def acos_series(s, prec, ctx=dctx):
    # acos(s) = pi/2 - asin(s) has an irrational constant term
    raise UnsupportedBranch("acos() not implemented")

def sinh_series(s, prec, ctx=dctx):
    Ring, s, prec = _setup(s, prec, ctx)
    return Ring.sinh_trunc(s, prec)

def cosh_series(s, prec, ctx=dctx):
    Ring, s, prec = _setup(s, prec, ctx)
    return Ring.cosh_trunc(s, prec)

def tanh_series(s, prec, ctx=dctx):
    Ring, s, prec = _setup(s, prec, ctx)
    return Ring.tanh_trunc(s, prec)

################################################################################
# Other operations on series
################################################################################

def reverse_series(s, prec, ctx=dctx):
    r"""
    Compute the compositional inverse `r` of ``s``, such that
    `s(r(x)) = r(s(x)) = x \bmod x^{prec}`.

    EXAMPLES::

        sage: from ratpseries.special import reverse_series, subs_series
        sage: Pol.<x> = QQ[]
        sage: reverse_series(x + x^2, 4)
        2*x^3 - x^2 + x
        sage: s = x - 2*x^2 + x^3/5
        sage: subs_series(s, reverse_series(s, 10), 10)
        x
        sage: reverse_series(x^2, 4)
        Traceback (most recent call last):
        ...
        ratpseries.errors.DivisionByZero: cannot revert a series with zero linear coefficient
    """
    Ring, s, prec = _setup(s, prec, ctx)
    return Ring.revert_trunc(s, prec)

def pow_series(s, prec, n, ctx=dctx):
    r"""
    Compute `s^n` for an integer ``n`` by repeated truncated multiplication.

    EXAMPLES::

        sage: from ratpseries.special import pow_series
        sage: Pol.<x> = QQ[]
        sage: pow_series(1 + x, 3, 5)
        10*x^2 + 5*x + 1
        sage: pow_series(1 + x, 4, -1)
        -x^3 + x^2 - x + 1
        sage: pow_series(x, 4, -1)
        Traceback (most recent call last):
        ...
        ratpseries.errors.DivisionByZero: cannot invert a series with zero constant term (Laurent series are not supported)
    """
    Ring, s, prec = _setup(s, prec, ctx)
    return Ring.pow_trunc(s, ZZ(n), prec)

def diff_series(s, ctx=dctx):
    r"""
    EXAMPLES::

        sage: from ratpseries.special import diff_series, integrate_series
        sage: Pol.<x> = QQ[]
        sage: diff_series(x^3 + x)
        3*x^2 + 1
        sage: integrate_series(_)
        x^3 + x
    """
    Ring = ctx.backend_for(s)
    return Ring.derivative(Ring.element(s))

def integrate_series(s, ctx=dctx):
    Ring = ctx.backend_for(s)
    return Ring.integral(Ring.element(s))

def subs_series(s, r, prec, ctx=dctx):
    r"""
    Compute the composition `s(r)` of two series, where ``r`` has zero
    constant term.

    EXAMPLES::

        sage: from ratpseries.special import subs_series, exp_series
        sage: Pol.<x> = QQ[]
        sage: subs_series(exp_series(x, 5), x + x^2, 4)
        7/6*x^3 + 3/2*x^2 + x + 1
        sage: _ == exp_series(x + x^2, 4)
        True
        sage: subs_series(x^2, 1 + x, 4)
        Traceback (most recent call last):
        ...
        ratpseries.errors.UnsupportedBranch: subs(const) not implemented
    """
    Ring, s, prec = _setup(s, prec, ctx)
    r = Ring.element(r)
    _check_zero_constant_term(Ring, r, "subs")
    return Ring.compose_trunc(Ring.truncate(s, prec), r, prec)

################################################################################
# Dispatch by name
################################################################################

_functions = {
    "nthroot": nthroot,
    "lambertw": lambertw,
    "sin": sin_series,
    "cos": cos_series,
    "inv": inv_series,
    "exp": exp_series,
    "log": log_series,
    "tan": tan_series,
    "atan": atan_series,
    "atanh": atanh_series,
    "asin": asin_series,
    "asinh": asinh_series,
    "acos": acos_series,
    "sinh": sinh_series,
    "cosh": cosh_series,
    "tanh": tanh_series,
    "reverse": reverse_series,
    "pow": pow_series,
}

def series_function(name):
    r"""
    Return the function computing the series of the function called ``name``.

    EXAMPLES::

        sage: from ratpseries.special import series_function
        sage: series_function("sin")
        <function sin_series at 0x...>
        sage: series_function("acosh")
        Traceback (most recent call last):
        ...
        KeyError: 'acosh'
    """
    return _functions[name]

def apply_series(name, s, prec, *args, ctx=dctx):
    r"""
    Apply the function called ``name`` to the series ``s``.

    Additional arguments (the exponent of ``"nthroot"`` and ``"pow"``) are
    passed after the precision.

    EXAMPLES::

        sage: from ratpseries.special import apply_series
        sage: Pol.<x> = QQ[]
        sage: apply_series("sinh", x, 4)
        1/6*x^3 + x
        sage: apply_series("nthroot", 1 + x, 3, 2)
        -1/8*x^2 + 1/2*x + 1
    """
    return series_function(name)(s, prec, *args, ctx=ctx)
