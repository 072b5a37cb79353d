# coding: utf-8
r"""
Identities between series

Cross-checks of the functions of :mod:`ratpseries.special` against each other
and against the primitives of the FLINT backend.

::

    sage: from ratpseries import *
    sage: Pol.<x> = QQ[]
    sage: series = [x, -x/3, x + x^2, x - x^3/6, 2*x - x^2 + 5*x^7,
    ....:           x/2 + x^4 - 7*x^9 + x^10/3]

Square roots and cube roots::

    sage: all(pow_series(nthroot(1 + s, p, n), p, n) == (1 + s).truncate(p)
    ....:     for s in series for p in [4, 8, 16, 32] for n in [2, 3, -2, -3])
    True
    sage: all(nthroot(pow_series(1 + s, p, 6), p, 3) == pow_series(1 + s, p, 2)
    ....:     for s in series for p in [5, 13])
    True
    sage: nthroot((4 + x)^2*x^4, 10, 2) == ((4 + x)*x^2)
    True

Lambert W is the inverse of `p \mapsto p e^p`::

    sage: all(lambertw(s*exp_series(s, p), p) == s.truncate(p)
    ....:     for s in series for p in [4, 8, 16, 32])
    True
    sage: all(subs_series(lambertw(x, p), s, p) == lambertw(s, p)
    ....:     for s in series for p in [5, 11])
    True

Sine and cosine::

    sage: all(sin_series(s, p) == s._sin_series(p)
    ....:     and cos_series(s, p) == s._cos_series(p)
    ....:     for s in series for p in [1, 4, 8, 16, 32])
    True
    sage: all((sin_series(s, p)^2 + cos_series(s, p)^2).truncate(p) == 1
    ....:     for s in series for p in [4, 8, 16, 32])
    True
    sage: all(sin_series(asin_series(s, p), p) == s.truncate(p)
    ....:     for s in series for p in [6, 17])
    True
    sage: all(2*pow_series(cos_series(s, p), p, 2) - 1 == cos_series(2*s, p)
    ....:     for s in series for p in [6, 17])
    True
    sage: s = x - x^3/6
    sage: sin_series(s, 4) == s._sin_series(4) == x - x^3/3
    True

Other functions::

    sage: all(exp_series(log_series(1 + s, p), p) == (1 + s).truncate(p)
    ....:     for s in series for p in [4, 9])
    True
    sage: all(tanh_series(atanh_series(s, p), p) == s.truncate(p)
    ....:     for s in series for p in [4, 9])
    True
    sage: all(subs_series(sin_series(x, p), reverse_series(sin_series(x, p), p), p) == x
    ....:     for p in [2, 5, 12])
    True
    sage: all(integrate_series(diff_series(s)) == s for s in series)
    True
"""
