# -*- coding: utf-8 - vim: tw=80
r"""
Precision schedules for Newton iteration
"""

# Copyright 2026 The ratpseries developers
#
# Distributed under the terms of the GNU General Public License (GPL) either
# version 2, or (at your option) any later version
#
# http://www.gnu.org/licenses/

import logging

logger = logging.getLogger(__name__)

def newton_steps(prec, start=2):
    r"""
    Iterate over the working precisions of a Newton iteration with target
    precision ``prec``.

    The precisions are `\lceil prec/2^k \rceil` for `k = K, \dots, 1, 0`,
    where `K` is the smallest integer such that the first precision is at most
    ``start``. In particular, each precision is at most twice the previous one,
    and the last one is exactly ``prec``.

    A single Newton step from the seeds used in :mod:`ratpseries.special`
    (zero for Lambert W, one for n-th roots) only yields a result correct to
    `O(x^2)`, so ``start`` must not exceed 2 for those iterations to produce
    ``prec`` correct terms.

    EXAMPLES::

        sage: from ratpseries.newton import newton_steps
        sage: list(newton_steps(16))
        [2, 4, 8, 16]
        sage: list(newton_steps(10))
        [2, 3, 5, 10]
        sage: list(newton_steps(100))
        [2, 4, 7, 13, 25, 50, 100]
        sage: list(newton_steps(10, start=1))
        [1, 2, 3, 5, 10]

    TESTS::

        sage: [list(newton_steps(p)) for p in range(-1, 5)]
        [[], [], [1], [2], [2, 3], [2, 4]]
        sage: all(b <= 2*a for p in range(1, 300)
        ....:     for steps in [list(newton_steps(p))]
        ....:     for a, b in zip(steps, steps[1:]))
        True
        sage: newton_steps(10, start=0)
        Traceback (most recent call last):
        ...
        ValueError: start must be positive, got 0
    """
    prec = int(prec)
    start = int(start)
    if start < 1:
        raise ValueError("start must be positive, got {}".format(start))
    if prec <= 0:
        return iter(())
    k = 0
    while -(-prec >> k) > start:
        k += 1
    logger.debug("prec=%s, %s Newton steps", prec, k + 1)
    return (-(-prec >> j) for j in range(k, -1, -1))
