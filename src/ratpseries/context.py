# -*- coding: utf-8 - vim: tw=80
r"""
Series computation contexts
"""

# Copyright 2026 The ratpseries developers
#
# Distributed under the terms of the GNU General Public License (GPL) either
# version 2, or (at your option) any later version
#
# http://www.gnu.org/licenses/

import pprint

from .backend import RingBackend, get_backend

class Context:
    r"""
    Series computation context

    Options:

    - ``backend`` (:class:`~ratpseries.backend.RingBackend` or ``None``) --
      Ring backend used for all operations. When ``None``, use the FLINT
      backend associated with the variable of the input series.

    - ``check`` (boolean) -- When ``True``, verify the results of Newton
      iterations (n-th roots) by raising them back to the corresponding power.
      This roughly doubles the cost and is meant for debugging.

    - ``sincos_algorithm`` (string) -- How to compute sines and cosines of
      series: ``"taylor"`` (summation of the Taylor series of the outer
      function using repeated truncated multiplication), ``"backend"``
      (primitive of the ring backend), or ``"auto"`` (Taylor summation when the
      argument has degree at most ``sincos_thr``, backend otherwise).

    - ``sincos_thr`` (int) -- Degree threshold used by
      ``sincos_algorithm="auto"``.

    EXAMPLES::

        sage: from ratpseries.context import Context, dctx
        sage: dctx.use_taylor_sincos(8), dctx.use_taylor_sincos(9)
        (True, False)
        sage: ctx = Context(sincos_algorithm="taylor")
        sage: ctx.use_taylor_sincos(40)
        True
        sage: Context(ctx=ctx).sincos_algorithm
        'taylor'

    TESTS::

        sage: Context(ctx=ctx, check=True)
        Traceback (most recent call last):
        ...
        ValueError: received both a Context object and keywords
        sage: Context(sincos_algorithm="fast")
        Traceback (most recent call last):
        ...
        ValueError: ('sincos_algorithm', 'fast')
        sage: Context(sincos_thr=-1)
        Traceback (most recent call last):
        ...
        ValueError: ('sincos_thr', -1)
        sage: Context(backend="flint")
        Traceback (most recent call last):
        ...
        TypeError: ('backend', <class 'str'>)
    """

    def __init__(self, *, ctx=None, **kwds):

        if ctx is None:
            self._set_options(**kwds)
        else:
            assert isinstance(ctx, Context)
            if kwds:
                raise ValueError("received both a Context object and keywords")
            self.__dict__.update(ctx.__dict__)

    def _set_options(self, *,
                     backend=None,
                     check=False,
                     sincos_algorithm="auto",
                     sincos_thr=8,
                     ):

        if backend is not None and not isinstance(backend, RingBackend):
            raise TypeError("backend", type(backend))
        self.backend = backend

        if not isinstance(check, bool):
            raise TypeError("check", type(check))
        self.check = check

        if sincos_algorithm not in ["auto", "taylor", "backend"]:
            raise ValueError("sincos_algorithm", sincos_algorithm)
        self.sincos_algorithm = sincos_algorithm

        self.sincos_thr = int(sincos_thr)
        if self.sincos_thr < 0:
            raise ValueError("sincos_thr", sincos_thr)

    def __repr__(self):
        return pprint.pformat(self.__dict__)

    def backend_for(self, s):
        if self.backend is None:
            return get_backend(s)
        return self.backend

    def use_taylor_sincos(self, degree):
        if self.sincos_algorithm == "auto":
            return degree <= self.sincos_thr
        return self.sincos_algorithm == "taylor"

dctx = Context() # default context
