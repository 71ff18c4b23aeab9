# -*- coding: utf-8 -*-
r"""
Cost of outputting many short vectors with BKZ-β instead of a single one.

A sieve in dimension :math:`\beta` outputs about :math:`2^{0.2075 \beta}` vectors of length
:math:`\sqrt{4/3}` times the shortest one :cite:`ADPS16`. The estimators below amortise the cost
of a reduction over this batch.

The result is a :py:class:`ShortVectors` tuple ``(rho, cost, count, dim)``:

- ``rho`` is a scaling factor. The output vectors are expected to be longer than the shortest
  vector expected from an SVP oracle by this factor.
- ``cost`` is the cost of outputting ``count`` vectors (not in log domain).
- ``count`` is the number of vectors output, which may be larger than the number requested.
- ``dim`` is the dimension of the sieve producing the vectors.

If the batch cannot be produced, :py:func:`matzov_short_vectors` returns an
:py:class:`InfeasibleShortVectors` instead.
"""

from typing import NamedTuple
import logging
import numpy as np

from . import constants
from .reduction import bkz_delta, kyber_cost, matzov_cost, reduce_dimension

## Logging ##
logger = logging.getLogger(__name__)


class ShortVectors(NamedTuple):
    rho: float
    cost: float
    count: int
    dim: int

    @property
    def is_feasible(self):
        return True


class InfeasibleShortVectors(ShortVectors):
    """
    Batch that would require more than :math:`2^{10000}` repetitions of the sieve. Compares equal to
    the tuple ``(rho, inf, MAX_COUNT, dim)``.
    """

    __slots__ = ()

    def __new__(cls, rho, dim):
        return super().__new__(cls, rho, np.inf, constants.MAX_COUNT, dim)

    def __getnewargs__(self):
        return (self.rho, self.dim)

    @property
    def is_feasible(self):
        return False


def _sieve_output(dim):
    return np.exp2(constants.SIEVE_OUTPUT_EXPONENT * dim)


def kyber_short_vectors(block_size, d, q=None, nb_vec_out=None, classical=True):
    """
    Cost of outputting many short vectors using BKZ-β following :cite:`Kyber20`. The last sieve of
    the reduction is reused, repeated ``ceil(nb_vec_out / batch)`` times if more vectors are needed.

    :param block_size: block size
    :param d: lattice dimension
    :param q: modulus (unused)
    :param nb_vec_out: number of vectors requested, ``None`` for one natural batch
    :param classical: ``False`` for the quantum cost model
    :returns: :py:class:`ShortVectors`

    EXAMPLE::

        >>> from lattice_reduction_estimation import kyber_short_vectors
        >>> kyber_short_vectors(100, 500).count
        176584
    """
    beta_ = block_size - np.floor(reduce_dimension(block_size))

    if nb_vec_out == 1:
        return ShortVectors(1.0, kyber_cost(block_size, d, q, classical), block_size, 1)
    elif nb_vec_out is None:
        return ShortVectors(
            constants.SIEVE_OUTPUT_SCALING,
            kyber_cost(block_size, d, q, classical),
            int(np.floor(_sieve_output(beta_))),
            int(beta_),
        )

    c = nb_vec_out / _sieve_output(beta_)
    return ShortVectors(
        constants.SIEVE_OUTPUT_SCALING,
        np.ceil(c) * kyber_cost(block_size, d, q, classical),
        int(np.floor(np.ceil(c) * _sieve_output(beta_))),
        int(beta_),
    )


def matzov_sieve_dim(block_size, d, classical=True):
    """
    Dimension of the final sieve following :cite:`GuoJoh21`: chosen such that a single sieve costs
    about as much as the BKZ-β reduction preceding it, at most ``d``.
    """
    beta_ = block_size - int(np.floor(reduce_dimension(block_size)))
    if block_size < d:
        t0, _ = constants.MATZOV_COEFFICIENTS[bool(classical)]
        C = constants.SIEVE_PROGRESSIVE_OVERHEAD
        return min(d, int(np.floor(beta_ + np.log2((d - block_size) * C) / t0)))
    return beta_


def matzov_short_vectors(block_size, d, q=None, nb_vec_out=None, classical=True):
    r"""
    Cost of outputting many short vectors according to :cite:`GuoJoh21` with the sieving cost of
    :cite:`MATZOV22`. A sieve in dimension ``sieve_dim`` (see :py:func:`matzov_sieve_dim`) is run on
    the first block of the BKZ-β reduced basis.

    The scaling factor is :math:`\sqrt{4/3} \cdot \delta_{s}^{s - 1} \cdot \delta_\beta^{1 - s}`
    for sieving dimension :math:`s`.

    :param block_size: block size
    :param d: lattice dimension
    :param q: modulus (unused)
    :param nb_vec_out: number of vectors requested, ``None`` for one natural batch
    :param classical: ``False`` for the quantum cost model
    :returns: :py:class:`ShortVectors` or :py:class:`InfeasibleShortVectors` if the batch has to be
        repeated more than :math:`2^{10000}` times
    """
    sieve_dim = matzov_sieve_dim(block_size, d, classical)

    rho = np.sqrt(4 / 3.0) * bkz_delta(sieve_dim) ** (sieve_dim - 1) * bkz_delta(block_size) ** (1 - sieve_dim)

    batch = int(np.floor(_sieve_output(sieve_dim)))
    if nb_vec_out == 1:
        return ShortVectors(1.0, kyber_cost(block_size, d, q, True), block_size, 1)
    elif nb_vec_out is None:
        nb_vec_out = batch
    nb_vec_out = int(nb_vec_out)

    if nb_vec_out > batch * 2**constants.INFEASIBLE_LOG2_MULTIPLIER:
        logger.debug(f"{nb_vec_out} vectors requested from batches of {batch}. Infeasible.")
        return InfeasibleShortVectors(rho, sieve_dim)

    t0, t1 = constants.MATZOV_COEFFICIENTS[bool(classical)]
    sieve_cost = constants.SIEVE_PROGRESSIVE_OVERHEAD * np.exp2(t0 * sieve_dim + t1)

    # exact integer ceiling, the multiplier may exceed the float range
    repeat = -(-nb_vec_out // batch)
    cost = matzov_cost(block_size, d, q, classical) + sieve_cost
    if repeat.bit_length() > 1000:
        cost = np.inf
    else:
        cost = repeat * cost
    return ShortVectors(rho, cost, repeat * batch, sieve_dim)
