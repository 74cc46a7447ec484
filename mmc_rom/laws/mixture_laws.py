"""Rule-of-mixtures homogenization laws for two-phase composites.

All laws are pure functions of the phase values, the reinforcement volume
fraction ``f`` and, for shape-dependent laws, the aspect ratio ``s``.

Operand convention (unless stated otherwise):
    a: reinforcement value
    b: matrix value
    f: reinforcement volume fraction in [0, 1]

Inputs may be Python floats or numpy arrays; array inputs broadcast so a
whole sweep can be evaluated in one call. Scalar inputs return a numpy
float64.

Degenerate inputs are not errors: division by zero and invalid operations
yield IEEE-754 inf/NaN, which propagate into the result.

References:
    Ashby, Acta Metall. Mater. 41 (1993) 1313, doi:10.1016/0956-7151(93)90242-K
    Shercliff and Ashby, Mater. Sci. Technol. 10 (1994) 443, doi:10.1179/mst.1994.10.6.443
    Akhtar, Canadian Metallurgical Quarterly 53 (2014) 253
"""

import numpy as np

# Prefactor of the lower-bound yield strength law
LBYS_COEFFICIENT = 1.0 / 16.0


def _arrays(*values):
    return [np.asarray(v, dtype=np.float64) for v in values]


def _result(value):
    # 0-d arrays come back as numpy scalars
    return value[()] if isinstance(value, np.ndarray) and value.ndim == 0 else value


def voigt(a, b, f):
    """Voigt (upper bound) rule of mixtures.

    Formula:
        E = f*a + (1-f)*b
    """
    a, b, f = _arrays(a, b, f)
    with np.errstate(invalid="ignore", over="ignore"):
        return _result(f * a + (1.0 - f) * b)


def reuss(a, b, f):
    """Reuss (lower bound) rule of mixtures.

    Formula:
        E = 1 / (f/a + (1-f)/b)

    A zero phase value makes one term infinite, so the harmonic mean
    collapses to 0; 0/0 terms (e.g. f = 0 with a = 0) give NaN.
    """
    a, b, f = _arrays(a, b, f)
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        return _result(1.0 / ((f / a) + ((1.0 - f) / b)))


def voigt_reuss_hill(upper, lower):
    """Voigt-Reuss-Hill mean of an upper and a lower estimate.

    The lower estimate is whatever lower-bound law applies to the
    property (Reuss, LBTC, Levin, ...), not necessarily Reuss.

    Formula:
        E = (upper + lower) / 2
    """
    upper, lower = _arrays(upper, lower)
    with np.errstate(invalid="ignore", over="ignore"):
        return _result((upper + lower) / 2.0)


def hashin(a, b, c, d, f):
    """Hashin elastic bound.

    Operands follow the elastic convention, matrix first:
        a: matrix modulus
        b: reinforcement modulus
        c: matrix Poisson's ratio
        d: reinforcement Poisson's ratio

    Formula:
        LM = (1-c) - 2c²
        LR = (1-d) - 2d²
        E  = b*f + a*(1-f) + 2(d-c)²f(1-d) / (a(1-c)LR + LM(1-f) + (1-c)b)

    The denominator can vanish for degenerate Poisson ratios.
    """
    a, b, c, d, f = _arrays(a, b, c, d, f)
    lm = (1.0 - c) - 2.0 * c**2
    lr = (1.0 - d) - 2.0 * d**2
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        coupling = (2.0 * (d - c) ** 2 * f * (1.0 - d)) / (
            a * (1.0 - c) * lr + (lm * (1.0 - f) + (1.0 - c) * b)
        )
        return _result(b * f + a * (1.0 - f) + coupling)


def halpin_tsai_efficiency(ratio, s):
    """Halpin-Tsai efficiency factor q = (r - 1) / (r + 2s)."""
    ratio, s = _arrays(ratio, s)
    with np.errstate(divide="ignore", invalid="ignore"):
        return _result((ratio - 1.0) / (ratio + 2.0 * s))


def halpin_tsai(base, other, f, s):
    """Halpin-Tsai shape-factor law.

    Args:
        base: Phase value the estimate is scaled from (the matrix in
            every catalog preset)
        other: Value of the other phase; r = other / base
        f: Volume fraction of the ``other`` phase
        s: Aspect ratio of the reinforcement

    Formula:
        q = (r - 1) / (r + 2s)
        E = base * (1 + 2*s*q*f) / (1 - q*f)

    Singular when q*f -> 1. As s -> inf the result tends to the
    Voigt value f*other + (1-f)*base.
    """
    base, other, f, s = _arrays(base, other, f, s)
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        q = halpin_tsai_efficiency(other / base, s)
        return _result(base * (1.0 + 2.0 * s * q * f) / (1.0 - q * f))


def lbys(a, b, f):
    """Lower-bound yield strength of a particle-reinforced matrix.

    Only the matrix strength ``b`` enters; ``a`` is accepted for a
    uniform (a, b, f) signature.

    Formula:
        σ = b * (1 + (1/16) * sqrt(f) / (1 - sqrt(f)))

    Singular as f -> 1.
    """
    a, b, f = _arrays(a, b, f)
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        root = np.sqrt(f)
        return _result(b * (1.0 + LBYS_COEFFICIENT * (root / (1.0 - root))))


def lbtc(a, b, f):
    """Lower-bound thermal conductivity (Maxwell type).

    Formula:
        k = b * (a + 2b - 2f(b-a)) / (a + 2b + f(b-a))
    """
    a, b, f = _arrays(a, b, f)
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        return _result(
            b * ((a + (2.0 * b) - (2.0 * f * (b - a))) / (a + (2.0 * b) + (f * (b - a))))
        )


def levin(a, b, c, d, f):
    """Levin elastic-modulus weighted mean.

    Args:
        a, b: Reinforcement and matrix values being averaged
        c, d: Reinforcement and matrix elastic moduli (weights)
        f: Reinforcement volume fraction

    Formula:
        α = (c*a*f + d*b*(1-f)) / (c*f + d*(1-f))
    """
    a, b, c, d, f = _arrays(a, b, c, d, f)
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        return _result(((c * a * f) + (d * b * (1.0 - f))) / ((c * f) + (d * (1.0 - f))))


def schapery(a, b, c, d, e, f):
    """Schapery thermal expansion coefficient.

    Args:
        a, b: Reinforcement and matrix expansion coefficients
        c: Coupling term, normally the Levin mean
        d, e: Reinforcement and matrix Poisson's ratios
        f: Reinforcement volume fraction

    Formula:
        α = f*a*(1+d) + (1-f)*b*(1+e) - c*(f*d + (1-f)*e)
    """
    a, b, c, d, e, f = _arrays(a, b, c, d, e, f)
    with np.errstate(invalid="ignore", over="ignore"):
        return _result(
            (f * a * (1.0 + d)) + ((1.0 - f) * b * (1.0 + e)) - (c * ((f * d) + ((1.0 - f) * e)))
        )
