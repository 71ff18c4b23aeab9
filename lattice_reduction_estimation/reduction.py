# -*- coding: utf-8 -*-
r"""
Cost of BKZ lattice reduction and the root Hermite factor it achieves.

NOTATION:

    beta        block size
    d           lattice dimension
    n           secret dimension
    q           modulus
    B           bitsize of entries

All functions are pure. Except for :py:func:`check_parameters` they do not validate their input:
callers must ensure :math:`2 \leq \beta \leq d`, :math:`d > n \geq 0` and :math:`q > 1`.

AUTHOR:
    Nicolai Krebs - 2021
"""

from bisect import bisect_right
import logging
import numpy as np
from scipy.optimize import newton

from . import constants
from . import reduction_cost_models as rcm
from .reduction_cost_models import CostModel

## Logging ##
logger = logging.getLogger(__name__)


## Exception class ##
class InvalidParameters(ValueError):
    pass


def check_parameters(block_size, d, n=0, q=None):
    """
    Check the preconditions of the cost models.

    :param block_size: block size, ``2 <= block_size <= d``
    :param d: lattice dimension, ``d > n``
    :param n: secret dimension, ``n >= 0``
    :param q: modulus, ``q > 1``. ``None`` or ``0`` skip the check as the cost models do not depend on ``q``.
    :raises InvalidParameters: if a precondition is violated
    """
    if not 2 <= block_size <= d:
        raise InvalidParameters(f"Block size must satisfy 2 <= block_size <= d. Given block_size={block_size}, d={d}.")
    if not 0 <= n < d:
        raise InvalidParameters(f"Dimensions must satisfy d > n >= 0. Given d={d}, n={n}.")
    if q and q <= 1:
        raise InvalidParameters(f"Modulus must be greater than 1. Given q={q}.")


## LLL and BKZ tours ##
def lll_cost(d, B=None):
    """
    Heuristic runtime of LLL :cite:`CheNgu11`.

    :param d: lattice dimension
    :param B: bitsize of entries, ignored if ``None``
    """
    if B is None:
        return float(d) ** 3
    else:
        return float(d) ** 3 * float(B) ** 2


def bkz_tours(beta, d):
    """
    Number of SVP oracle calls in BKZ-β, loosely based on experiments in :cite:`Chen13`. Returns 1 if ``d <= beta``.
    """
    if beta < d:
        return constants.NB_BKZ_TOURS * d
    else:
        return 1


## Combined models ##
def reduce_dimension(beta):
    """
    Dimensions "for free" following :cite:`Ducas18`. Sieving is expected to be required up to
    dimension ``beta - reduce_dimension(beta)``.

    EXAMPLE::

        >>> from lattice_reduction_estimation.reduction import reduce_dimension
        >>> reduce_dimension(500)
        42.597...
    """
    return max(float(beta * np.log(4 / 3.0) / np.log(beta / (2 * np.pi * np.e))), 0.0)


def _combined_cost(beta, d, coefficients):
    if beta < 20:
        # the fits do not hold for small block sizes
        return rcm.chengue_enum(beta)

    t0, t1 = coefficients
    C = constants.SIEVE_PROGRESSIVE_OVERHEAD
    # "The cost of progressive BKZ with sieving up to blocksize b is essentially C · (n − b)
    # times the cost of sieving for SVP in dimension b." :cite:`Kyber20`
    if d - beta > 1:
        svp_calls = C * (d - beta)
    else:
        svp_calls = C
    # not rounded to keep the cost continuously increasing in beta
    beta_ = beta - reduce_dimension(beta)
    gates = C * np.exp2(t0 * beta_ + t1)
    return lll_cost(d) + svp_calls * gates


def kyber_cost(beta, d, q=None, classical=True):
    """
    Runtime estimation from :cite:`Kyber20` and :cite:`AGPS20`, list decoding sieve.

    :param beta: block size
    :param d: lattice dimension
    :param q: modulus (unused)
    :param classical: ``False`` for the depth × width quantum metric
    """
    return _combined_cost(beta, d, constants.KYBER_COEFFICIENTS[bool(classical)])


def matzov_cost(beta, d, q=None, classical=True):
    """Same as :py:func:`kyber_cost` with the sieving fit of :cite:`MATZOV22`."""
    return _combined_cost(beta, d, constants.MATZOV_COEFFICIENTS[bool(classical)])


## Dispatcher ##
def svp_cost(cost_model: CostModel, beta):
    """
    Cost of one SVP oracle call in dimension ``beta``. Not defined for combined models.

    :param cost_model: instance of :py:class:`lattice_reduction_estimation.reduction_cost_models.CostModel`
    :param beta: block size
    """
    kind = cost_model.kind
    if kind == rcm.LOTUS_ENUM:
        return rcm.lotus_enum(beta)
    elif kind == rcm.CHENGUE_ENUM:
        return rcm.chengue_enum(beta)
    elif kind == rcm.ABF_ENUM:
        return rcm.abf_enum(beta, cost_model.classical)
    elif kind == rcm.ABLR_ENUM:
        return rcm.ablr_enum(beta)
    elif kind == rcm.BDGL_SIEVE:
        return rcm.bdgl_sieve(beta)
    elif kind == rcm.Q_SIEVE:
        return rcm.q_sieve(beta)
    elif kind == rcm.ADPS_SIEVE:
        return rcm.adps_sieve(beta, cost_model.classical)
    elif kind == rcm.BJG_SIEVE:
        return rcm.bjg_sieve(beta)
    elif kind == rcm.CHALOY_SIEVE:
        return rcm.chaloy_sieve(beta)
    elif kind in rcm.COMBINED:
        raise ValueError(f"{kind} is a combined model and has no separate SVP oracle cost.")
    raise ValueError(f"Unknown cost model {kind}. Please use the constants in reduction_cost_models.")


def bkz_cost(cost_model: CostModel, block_size, d, q=None, bit_size=None):
    """
    Cost of BKZ-β reduction of a ``d``-dimensional lattice.

    For combined models the cost of the model is returned as is. Otherwise the cost is
    ``bkz_tours(block_size, d) * svp_cost + lll_cost(d, bit_size)``.

    :param cost_model: instance of :py:class:`lattice_reduction_estimation.reduction_cost_models.CostModel`
    :param block_size: block size
    :param d: lattice dimension
    :param q: modulus, none of the models depends on it
    :param bit_size: bitsize of the basis entries used for the LLL cost
    :returns: cost (not in log domain)

    EXAMPLE::

        >>> from math import log2
        >>> from lattice_reduction_estimation import CostModel, KYBER, bkz_cost
        >>> round(log2(bkz_cost(CostModel(KYBER), 500, 1024, 0)))
        177
    """
    if cost_model.kind == rcm.KYBER:
        return kyber_cost(block_size, d, q, cost_model.classical)
    elif cost_model.kind == rcm.MATZOV:
        return matzov_cost(block_size, d, q, cost_model.classical)

    return bkz_tours(block_size, d) * svp_cost(cost_model, block_size) + lll_cost(d, bit_size)


## Root Hermite factor ##
def bkz_delta(block_size):
    r"""
    Root Hermite factor :math:`\delta_0` achieved by BKZ-β.

    For :math:`\beta \leq 40` the experimental values in
    :py:data:`lattice_reduction_estimation.constants.DELTA_SMALL_BLOCK_SIZES` are used as a step
    function, above the asymptotic formula of :cite:`Chen13`

    .. math::
        \delta_0 = \left(\frac{\beta}{2 \pi e} (\pi \beta)^{1/\beta}\right)^{1/(2(\beta - 1))}.

    :param block_size: block size
    """
    if block_size <= 2:
        return constants.DELTA_VALUES[0]
    elif block_size <= 40:
        return constants.DELTA_VALUES[bisect_right(constants.DELTA_KEYS, block_size) - 1]
    else:
        beta = float(block_size)
        return (beta / (2 * np.pi * np.e) * (np.pi * beta) ** (1 / beta)) ** (1 / (2 * (beta - 1)))


def _beta_simple(delta):
    beta = 40
    while bkz_delta(2 * beta) > delta:
        beta *= 2
    while bkz_delta(beta + 10) > delta:
        beta += 10
    while bkz_delta(beta) >= delta:
        beta += 1
    return beta


def bkz_beta(delta):
    """
    Estimate the block size required to achieve root Hermite factor ``delta`` based on :cite:`Chen13`.

    :param delta: root Hermite factor
    :returns: block size, at least 40

    EXAMPLE::

        >>> from lattice_reduction_estimation.reduction import bkz_beta
        >>> bkz_beta(1.0121)
        50
        >>> bkz_beta(1.0093)
        100
    """
    if bkz_delta(40) < delta:
        return 40

    try:
        beta = newton(lambda beta: bkz_delta(beta) - delta, 100, fprime=None, tol=1.48e-08, maxiter=500)
        beta = int(np.ceil(beta))
        if beta < 40:
            # the secant method may jump into the region of the experimental values
            raise RuntimeError("β < 40")
        return beta
    except (RuntimeError, TypeError) as e:
        logger.debug(f"Secant method failed for delta={delta} ({e}). Falling back to search.")
        return _beta_simple(delta)
