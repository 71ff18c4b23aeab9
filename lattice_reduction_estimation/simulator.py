# -*- coding: utf-8 -*-
r"""
Simulators for the shape of BKZ-β reduced bases.

Both simulators return the squared Gram-Schmidt norms :math:`\|b_i^*\|^2` of a reduced basis of a
``d``-dimensional q-ary lattice with ``n`` unit coordinates, largest first. If ``approx`` is given,
the last q-vector is replaced by an embedding coordinate of length ``approx`` (inhomogeneous case).
"""

import numpy as np

from . import constants
from .reduction import bkz_delta


def _log_volume(d, n, q, approx=None):
    if approx is None:
        return np.log2(q) * (d - n) + np.log2(1.0) * n
    else:
        return np.log2(q) * (d - n - 1) + np.log2(1.0) * n + np.log2(approx)


def gsa_simulator(d, n, q, block_size, approx=None):
    r"""
    Geometric series assumption :cite:`Schnorr03`:
    :math:`\log_2 \|b_i^*\| = (d - 1 - 2i) \log_2 \delta_0 + \log_2(\mathrm{vol}) / d`.

    :param d: lattice dimension
    :param n: number of unit coordinates
    :param q: modulus
    :param block_size: block size
    :param approx: length of the embedding coordinate, ``None`` for the homogeneous case
    :returns: numpy array of ``d`` squared norms
    """
    log_volume = _log_volume(d, n, q, approx)
    delta = bkz_delta(block_size)

    r_log = (d - 1 - 2 * np.arange(d)) * np.log2(delta) + log_volume / d
    return np.exp2(2 * r_log)


def zgsa_slope(block_size):
    """
    Slope of the reduced part of the profile: experimental values for ``block_size <= 60``, the
    GSA slope for ``block_size > 70`` and a linear interpolation in between.
    """
    if block_size <= 60:
        return constants.SMALL_SLOPE_T8[block_size]
    elif block_size <= 70:
        r = (70 - block_size) / 10.0
        return r * constants.SMALL_SLOPE_T8[60] + (1 - r) * 2 * np.log2(bkz_delta(70))
    else:
        return 2 * np.log2(bkz_delta(70))


def zgsa_simulator(d, n, q, block_size, approx=None):
    r"""
    Z-shape GSA :cite:`Howgrave-Graham07`: the profile starts with a flat region of q-vectors,
    followed by a sloped region and ends with a flat region of unit vectors.

    The first ``l = d - n`` entries (``d - n - 1`` if ``approx`` is given) are the q-vectors, the
    remaining entries are the unit coordinates (and the embedding coordinate), so the profile
    carries the log volume of :py:func:`gsa_simulator`. Starting at half the slope, entries are
    replaced symmetrically around ``(log q + log 1)/2`` outwards from index ``l``; replacements
    outside the profile are skipped and the loop ends once the spread exceeds
    ``(log q - log 1)/2``.

    .. note :: The profile is exponentiated with base :math:`e`, not with base 2 as in :py:func:`gsa_simulator`.

    :param d: lattice dimension
    :param n: number of unit coordinates
    :param q: modulus
    :param block_size: block size
    :param approx: length of the embedding coordinate, ``None`` for the homogeneous case
    :returns: numpy array of ``d`` squared norms
    """
    if approx is None:
        l = d - n
        tail = [np.log2(1.0)] * n
    else:
        l = d - n - 1
        tail = [np.log2(approx)] + [np.log2(1.0)] * n

    l_log = np.array([np.log2(q)] * l + tail, dtype=float)
    slope = zgsa_slope(block_size)

    center = (np.log2(q) + np.log2(1.0)) / 2
    max_diff = (np.log2(q) - np.log2(1.0)) / 2
    diff = slope / 2

    for i in range(l):
        if diff > max_diff:
            break

        low = l - i - 1
        high = l + i
        if 0 <= low < len(l_log):
            l_log[low] = center + diff
        if high < len(l_log):
            l_log[high] = center - diff

        diff += slope

    l_log = np.sort(l_log)[::-1]
    return np.exp(2 * l_log)
