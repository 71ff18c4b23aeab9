# -*- coding: utf-8 -*-
r"""
SVP oracle cost models for BKZ lattice reduction.

Each sieving and enumeration model maps a block size :math:`\beta` to the cost of a single SVP
oracle call in dimension :math:`\beta`. The number of oracle calls and the LLL preprocessing are
added by :py:func:`lattice_reduction_estimation.reduction.bkz_cost`. The combined models
(:cite:`Kyber20`, :cite:`MATZOV22`) already include the BKZ tour structure and are evaluated in
:py:mod:`lattice_reduction_estimation.reduction`.

The regime cuts (e.g. :math:`\beta < 90` for :cite:`BDGL16`) are taken from the respective papers
and are discontinuous.

.. list-table:: Notation
    :header-rows: 1

    * - beta
      - d
      - B
    * - block size
      - lattice dimension
      - bitsize of entries


.. _cost-models:

The value for key ``prio`` orders the models roughly by their cost at :math:`\beta = 500`. The
scale is ordinal, not cardinal. :py:class:`lattice_reduction_estimation.algorithms.Configuration`
returns selected models in this order.
"""

from typing import NamedTuple
import numpy as np

## Cost models ##
# Sieving
BDGL_SIEVE = "bdgl-sieve"
Q_SIEVE = "q-sieve"
BJG_SIEVE = "bjg-sieve"
ADPS_SIEVE = "adps-sieve"
CHALOY_SIEVE = "chaloy-sieve"

# Enumeration
CHENGUE_ENUM = "chengue-enum"
ABF_ENUM = "abf-enum"
ABLR_ENUM = "ablr-enum"
LOTUS_ENUM = "lotus-enum"

# Combined (BKZ tours already included)
KYBER = "kyber"
MATZOV = "matzov"

SIEVING = [BDGL_SIEVE, Q_SIEVE, BJG_SIEVE, ADPS_SIEVE, CHALOY_SIEVE]
ENUMERATION = [CHENGUE_ENUM, ABF_ENUM, ABLR_ENUM, LOTUS_ENUM]
COMBINED = [KYBER, MATZOV]

# All
ALL = SIEVING + ENUMERATION + COMBINED


class CostModel(NamedTuple):
    """
    Selects a reduction cost model.

    :param kind: one of the constants in :py:data:`ALL`, e.g. ``ADPS_SIEVE``
    :param classical: ``False`` selects the quantum variant for ``ADPS_SIEVE``, ``ABF_ENUM``, ``KYBER``
        and ``MATZOV``, ignored for all other models
    """

    kind: str
    classical: bool = True

    def is_combined(self):
        return self.kind in COMBINED

    def __str__(self) -> str:
        return f'{self.kind}{["-quantum", ""][self.classical]}'


## Sieving ##
def bdgl_sieve(beta):
    r"""
    Sieving following :cite:`BDGL16`. Experimental exponent :math:`0.387` for small block sizes,
    asymptotic exponent :math:`0.292` from :math:`\beta = 90` onwards.
    """
    if beta < 90:
        return np.exp2(0.387 * beta + 16.4)
    else:
        return np.exp2(0.292 * beta + 16.4)


def chaloy_sieve(beta):
    """Quantum sieving for Core-SVP :cite:`ChaLoy21`."""
    return np.exp2(0.257 * beta)


def bjg_sieve(beta):
    return np.exp2(0.311 * beta)


def adps_sieve(beta, classical=True):
    """
    Core-SVP sieving cost :cite:`ADPS16`.

    :param beta: block size
    :param classical: ``False`` for the quantum exponent
    """
    if classical:
        return np.exp2(0.292 * beta)
    else:
        return np.exp2(0.265 * beta)


def q_sieve(beta):
    """Quantum sieving :cite:`LaaMosPol14` with the additive constant of :cite:`BDGL16`."""
    return np.exp2(0.265 * beta + 16.4)


## Enumeration ##
def chengue_enum(beta):
    r"""
    Enumeration fitted to Table 4 of :cite:`CheNgu12`.

    The fit counts enumeration nodes, :math:`\log_2(100)` accounts for the cycles needed to process
    one node :cite:`ACDDPPVW18`.
    """
    cost = (
        0.270188776350190 * beta * np.log(beta)
        - 1.0192050451318417 * beta
        + 16.10253135200765
        + np.log2(100)
    )
    return np.exp2(cost)


def abf_enum(beta, classical=True):
    """
    Enumeration cost according to :cite:`ABFKSW20`. The crossover of the two classical fits is at
    ``beta = 92``.
    """
    if not classical:
        return np.exp2(0.0625 * beta * np.log2(beta))

    if beta <= 92:
        power = 0.1839 * beta * np.log2(beta) - 0.995 * beta + 22.25
    else:
        power = 0.125 * beta * np.log2(beta) - 0.547 * beta + 16.4
    return np.exp2(power)


def ablr_enum(beta):
    """Enumeration cost according to :cite:`ABLR21`, crossover at ``beta = 97``."""
    if beta <= 97:
        power = 0.1839 * beta * np.log2(beta) - 1.077 * beta + 35.12
    else:
        power = 0.125 * beta * np.log2(beta) - 0.654 * beta + 31.84
    return np.exp2(power)


def lotus_enum(beta):
    return np.exp2(0.125 * beta * np.log2(beta) - 0.755 * beta + 22.74)


BKZ_COST_MODELS = [
    {
        "name": "ChaLoy-Sieve",
        "reference": ":cite:`ChaLoy21`",
        "cost_model": CostModel(CHALOY_SIEVE),
        "human_friendly": "2^(0.257 β)",
        "latex": r"2^{0.257 \beta}",
        "quantum": True,
        "method": "sieving",
        "prio": 0,
    },
    {
        "name": "Q‑ADPS-Sieve",
        "reference": ":cite:`ADPS16`",
        "cost_model": CostModel(ADPS_SIEVE, classical=False),
        "human_friendly": "2^(0.265 β)",
        "latex": r"2^{0.265 \beta}",
        "quantum": True,
        "method": "sieving",
        "prio": 1,
    },
    {
        "name": "ADPS-Sieve",
        "reference": ":cite:`ADPS16`",
        "cost_model": CostModel(ADPS_SIEVE),
        "human_friendly": "2^(0.292 β)",
        "latex": r"2^{0.292 \beta}",
        "quantum": False,
        "method": "sieving",
        "prio": 10,
    },
    {
        "name": "Q‑Sieve",
        "reference": ":cite:`LaaMosPol14`",
        "cost_model": CostModel(Q_SIEVE),
        "human_friendly": "2^(0.265 β + 16.4)",
        "latex": r"2^{0.265 \beta + 16.4}",
        "quantum": True,
        "method": "sieving",
        "prio": 15,
    },
    {
        "name": "BJG-Sieve",
        "reference": ":cite:`BGJ15`",
        "cost_model": CostModel(BJG_SIEVE),
        "human_friendly": "2^(0.311 β)",
        "latex": r"2^{0.311 \beta}",
        "quantum": False,
        "method": "sieving",
        "prio": 20,
    },
    {
        "name": "Q‑Matzov",
        "reference": ":cite:`MATZOV22`, :cite:`AGPS20`",
        "cost_model": CostModel(MATZOV, classical=False),
        "human_friendly": "d³ + 5.46 (d - β) 5.46 2^(0.266 β' + 25.3)",
        "latex": r"d^3 + 5.46 (d - \beta) \cdot 5.46 \cdot 2^{0.266 \beta' + 25.3}",
        "quantum": True,
        "method": "combined",
        "prio": 25,
    },
    {
        "name": "BDGL-Sieve",
        "reference": ":cite:`BDGL16`",
        "cost_model": CostModel(BDGL_SIEVE),
        "human_friendly": "2^(0.387 β + 16.4) for β < 90, 2^(0.292 β + 16.4) otherwise",
        "latex": r"2^{0.292 \beta + 16.4}",
        "quantum": False,
        "method": "sieving",
        "prio": 30,
    },
    {
        "name": "Q‑Kyber",
        "reference": ":cite:`Kyber20`, :cite:`AGPS20`",
        "cost_model": CostModel(KYBER, classical=False),
        "human_friendly": "d³ + 5.46 (d - β) 5.46 2^(0.269 β' + 29.0)",
        "latex": r"d^3 + 5.46 (d - \beta) \cdot 5.46 \cdot 2^{0.269 \beta' + 29.0}",
        "quantum": True,
        "method": "combined",
        "prio": 35,
    },
    {
        "name": "Matzov",
        "reference": ":cite:`MATZOV22`, :cite:`AGPS20`",
        "cost_model": CostModel(MATZOV),
        "human_friendly": "d³ + 5.46 (d - β) 5.46 2^(0.296 β' + 20.4)",
        "latex": r"d^3 + 5.46 (d - \beta) \cdot 5.46 \cdot 2^{0.296 \beta' + 20.4}",
        "quantum": False,
        "method": "combined",
        "prio": 40,
    },
    {
        "name": "Kyber",
        "reference": ":cite:`Kyber20`, :cite:`AGPS20`",
        "cost_model": CostModel(KYBER),
        "human_friendly": "d³ + 5.46 (d - β) 5.46 2^(0.299 β' + 26.0)",
        "latex": r"d^3 + 5.46 (d - \beta) \cdot 5.46 \cdot 2^{0.299 \beta' + 26.0}",
        "quantum": False,
        "method": "combined",
        "prio": 50,
    },
    {
        "name": "Lotus",
        "reference": ":cite:`PHAM17`, :cite:`ACDDPPVW18`",
        "cost_model": CostModel(LOTUS_ENUM),
        "human_friendly": "2^(0.125 β log β - 0.755 β + 22.74)",
        "latex": r"2^{0.125 \beta \log \beta - 0.755 \beta + 22.74}",
        "quantum": False,
        "method": "enumeration",
        "prio": 60,
    },
    {
        "name": "ABLR-Enum",
        "reference": ":cite:`ABLR21`",
        "cost_model": CostModel(ABLR_ENUM),
        "human_friendly": "2^(0.125 β log β - 0.654 β + 31.84) for β > 97",
        "latex": r"2^{0.125 \beta \log \beta - 0.654 \beta + 31.84}",
        "quantum": False,
        "method": "enumeration",
        "prio": 70,
    },
    {
        "name": "Q-ABF-Enum",
        "reference": ":cite:`ABFKSW20`",
        "cost_model": CostModel(ABF_ENUM, classical=False),
        "human_friendly": "2^(0.0625 β log β)",
        "latex": r"2^{0.0625 \beta \log \beta}",
        "quantum": True,
        "method": "enumeration",
        "prio": 80,
    },
    {
        "name": "ABF-Enum",
        "reference": ":cite:`ABFKSW20`",
        "cost_model": CostModel(ABF_ENUM),
        "human_friendly": "2^(0.125 β log β - 0.547 β + 16.4) for β > 92",
        "latex": r"2^{0.125 \beta \log \beta - 0.547 \beta + 16.4}",
        "quantum": False,
        "method": "enumeration",
        "prio": 90,
    },
    {
        "name": "CheNgue-Enum",
        "reference": ":cite:`CheNgu12`, :cite:`ACDDPPVW18`",
        "cost_model": CostModel(CHENGUE_ENUM),
        "human_friendly": "2^(0.270 β ln β - 1.019 β + 16.10 + log 100)",
        "latex": r"2^{0.270 \beta \ln \beta - 1.019 \beta + 16.10 + \log 100}",
        "quantum": False,
        "method": "enumeration",
        "prio": 100,
    },
]

table = ".. list-table:: Reduction Cost Models\n\
   :header-rows: 1\n\
\n\
   * - Name\n\
     - Reference\n\
     - SVP oracle cost\n\
     - Quantum\n\
     - Method\n\
     - Priority\n"

for model in BKZ_COST_MODELS:
    table += "   * - " + model["name"] + "\n"
    table += "     - " + model["reference"] + "\n"
    table += "     - :math:`" + model["latex"] + "`\n"
    table += "     - " + ["", "X"][model["quantum"]] + "\n"
    table += "     - " + model["method"] + "\n"
    table += "     - " + str(model["prio"]) + "\n"

__doc__ += f"\n{table}"
