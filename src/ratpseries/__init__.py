#############################################################################
#  Copyright (C) 2026 The ratpseries developers                             #
#                                                                           #
#  Distributed under the terms of the GNU General Public License (GPL)      #
#  either version 2, or (at your option) any later version                  #
#                                                                           #
#  https://www.gnu.org/licenses/                                            #
#############################################################################
r"""
Truncated power series of special functions over the rationals

EXAMPLES::

    sage: from ratpseries import nthroot, lambertw, sin_series
    sage: Pol.<x> = QQ[]
    sage: nthroot(9 + 18*x, 3, 2)
    -3/2*x^2 + 3*x + 3
    sage: lambertw(x, 3)
    -x^2 + x
    sage: sin_series(x, 4)
    -1/6*x^3 + x
"""

from .context import Context
from .errors import (SeriesError, UnsupportedBranch, PuiseuxUnsupported,
                     NoExactRoot, DivisionByZero)
from .backend import RingBackend, FlintBackend, get_backend
from .newton import newton_steps
from .special import (nthroot, lambertw, sin_series, cos_series,
                      inv_series, exp_series, log_series, tan_series,
                      atan_series, atanh_series, asin_series, asinh_series,
                      acos_series, sinh_series, cosh_series, tanh_series,
                      reverse_series, pow_series, diff_series,
                      integrate_series, subs_series, series_function,
                      apply_series)
