"""Closed-form line integral for the field of a straight current segment

Along a straight wire parametrized by x the Biot-Savart integrand reduces to
$(x^2 - a x + b)^{-3/2}$ times a constant cross product, whose antiderivative
is known analytically, so no numerical quadrature is needed.

The kernels are jitted with the numpy error model: singular configurations
(vanishing discriminant, negative radicand) yield inf/NaN instead of raising.
They accept scalars as well as numpy arrays.
"""
import numba
import numpy as np


# mu_0 / (4 pi) with the exact pre-2019 SI value of mu_0
_SI_FACTOR = 1e-7


@numba.jit(nopython=True, nogil=True, error_model='numpy')
def intres(x, a, b):
    """Antiderivative of 1/(x^2 - a x + b)^(3/2) at x, integration constant omitted"""
    return 2.0 * (2.0*x - a) / ((4.0*b - a*a) * np.sqrt(x*(x - a) + b))


@numba.jit(nopython=True, nogil=True, error_model='numpy')
def definite_integral(length, a, b):
    """Integral of 1/(x^2 - a x + b)^(3/2) over [0, length]"""
    return intres(length, a, b) - intres(0.0, a, b)
