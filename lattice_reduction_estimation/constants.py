# -*- coding: utf-8 -*-
r"""
Calibrated constants of the reduction cost models.

All values are regression fits or experimental averages taken from the literature, see
:ref:`cost_models <cost-models>`. They are copied verbatim and must not be rounded.
"""

## BKZ ##
NB_BKZ_TOURS = 8

# progressive overhead lim_{β → ∞} ∑_{i ≤ β} 2^{0.292 i + o(i)}/2^{0.292 β + o(β)} :cite:`Kyber20`
SIEVE_PROGRESSIVE_OVERHEAD = 5.46

# a sieve in dimension β outputs about 2^{0.2075 β} vectors :cite:`ADPS16`
SIEVE_OUTPUT_EXPONENT = 0.2075

# sqrt(4/3), length of sieve output relative to the shortest vector
SIEVE_OUTPUT_SCALING = 1.1547

## Short vectors ##
INFEASIBLE_LOG2_MULTIPLIER = 10000
MAX_COUNT = 2 ** 64 - 1

## Root Hermite factor ##
# δ_0 for β ≤ 40 from BKZ 2.0 experiments with d = 320 (fplll, 32 trials per block size)
DELTA_SMALL_BLOCK_SIZES = (
    (2, 1.02190),
    (5, 1.01862),
    (10, 1.01616),
    (15, 1.01485),
    (20, 1.01420),
    (25, 1.01342),
    (28, 1.01331),
    (40, 1.01295),
)
DELTA_KEYS = tuple(beta for beta, _ in DELTA_SMALL_BLOCK_SIZES)
DELTA_VALUES = tuple(delta for _, delta in DELTA_SMALL_BLOCK_SIZES)

## Combined models ##
# (t0, t1) such that log2(gates) ≈ t0 β + t1 for list decoding sieving :cite:`AGPS20`
KYBER_COEFFICIENTS = {
    True: (0.2988026130564745, 26.011121212891872),  # classical
    False: (0.26944796385592995, 28.97237346443934),  # depth × width
}
# same fit with the improvement of :cite:`MATZOV22` applied
MATZOV_COEFFICIENTS = {
    True: (0.29613500308205365, 20.387885985467914),
    False: (0.2663676536352464, 25.299541499216627),
}

## Z-shape ##
# slope of the log profile of BKZ-β reduced bases with 8 tours, β ≤ 60 (experimental)
SMALL_SLOPE_T8 = {
    2: 0.04473,
    3: 0.04472,
    4: 0.04402,
    5: 0.04407,
    6: 0.04334,
    7: 0.04326,
    8: 0.04218,
    9: 0.04237,
    10: 0.04144,
    11: 0.04054,
    12: 0.03961,
    13: 0.03862,
    14: 0.03745,
    15: 0.03673,
    16: 0.03585,
    17: 0.03503,
    18: 0.03436,
    19: 0.03378,
    20: 0.03301,
    21: 0.03266,
    22: 0.03187,
    23: 0.03165,
    24: 0.03113,
    25: 0.03067,
    26: 0.03036,
    27: 0.02997,
    28: 0.02969,
    29: 0.02922,
    30: 0.02894,
    31: 0.02852,
    32: 0.02814,
    33: 0.02788,
    34: 0.02750,
    35: 0.02723,
    36: 0.02702,
    37: 0.02666,
    38: 0.02638,
    39: 0.02613,
    40: 0.02588,
    41: 0.02569,
    42: 0.02548,
    43: 0.02525,
    44: 0.02504,
    45: 0.02484,
    46: 0.02463,
    47: 0.02444,
    48: 0.02426,
    49: 0.02407,
    50: 0.02390,
    51: 0.02373,
    52: 0.02358,
    53: 0.02341,
    54: 0.02326,
    55: 0.02310,
    56: 0.02296,
    57: 0.02282,
    58: 0.02268,
    59: 0.02255,
    60: 0.02241,
}
