# -*- coding: utf-8 -*-
r"""Module for cost estimation over several reduction cost models. Includes a configuration class and result classes."""

from typing import List
import logging
import time
import numpy as np

from . import reduction_cost_models as rcm
from .reduction import bkz_cost, bkz_delta, check_parameters
from .reduction_cost_models import BKZ_COST_MODELS, CostModel

## Logging ##
logger = logging.getLogger(__name__)
# info about evaluated cost models and results
alg_logger = logging.getLogger(logger.name + ".estimation_logging")
SEPARATOR = (
    "\n----------------------------------------------------------------------------"
)


## Exception class ##
class EmptyConfiguration(Exception):
    pass


class Configuration:
    def __init__(
        self,
        classical=True,
        quantum=True,
        sieving=True,
        enumeration=True,
        combined=True,
        cost_models: List[CostModel] = None,
        check_parameters=True,
    ):
        r"""
        Configuration of the cost estimation (selection of cost models).

        Cost models are taken from :py:data:`lattice_reduction_estimation.reduction_cost_models.BKZ_COST_MODELS`
        and filtered by the flags below. If ``sieving=False``, ``enumeration=False`` or
        ``combined=False``, the cost models in the respective groups are removed from the list. For
        more details, see :ref:`cost_models <cost-models>`.

        To use an explicit selection of cost models set ``cost_models``, e.g.::

            Configuration(cost_models=[CostModel(ADPS_SIEVE), CostModel(KYBER, classical=False)])

        Note that the filters do not apply to ``cost_models``.

        :param classical: use classical cost models, ``True`` by default
        :param quantum: use quantum cost models, ``True`` by default
        :param sieving: use sieving cost models, ``True`` by default
        :param enumeration: use enumeration cost models, ``True`` by default
        :param combined: use the combined models :cite:`Kyber20` and :cite:`MATZOV22`, ``True`` by default
        :param cost_models: explicit list of :py:class:`lattice_reduction_estimation.reduction_cost_models.CostModel`
        :param check_parameters: validate parameters before running estimates, ``True`` by default
        """
        if cost_models is not None:
            if not cost_models:
                raise EmptyConfiguration("cost_models empty. Please choose cost models to run the estimates.")
            if not all(c.kind in rcm.ALL for c in cost_models):
                raise ValueError(
                    "cost_models not specified correctly. Please use the constants specified in the documentation."
                )

        self.classical = classical
        self.quantum = quantum
        self.sieving = sieving
        self.enumeration = enumeration
        self.combined = combined
        self.custom_cost_models = cost_models
        self.check_parameters = check_parameters

    def cost_models(self):
        """
        Returns list of selected cost models ordered by ``prio``.
        """
        if self.custom_cost_models is not None:
            return list(self.custom_cost_models)

        methods = []
        if self.sieving:
            methods.append("sieving")
        if self.enumeration:
            methods.append("enumeration")
        if self.combined:
            methods.append("combined")

        cost_models = [
            model
            for model in BKZ_COST_MODELS
            if model["method"] in methods
            and ((self.quantum and model["quantum"]) or (self.classical and not model["quantum"]))
        ]
        return [model["cost_model"] for model in sorted(cost_models, key=lambda m: m["prio"])]

    def __str__(self) -> str:
        return "Cost models: " + ", ".join(str(c) for c in self.cost_models())


def cost_model_name(cost_model: CostModel):
    for model in BKZ_COST_MODELS:
        if model["cost_model"] == cost_model:
            return model["name"]
    return str(cost_model)


## Results ##
class ReductionCostEstimate:
    """
    Encapsulates the estimate of one cost model.
    """

    def __init__(self, cost_model: CostModel, block_size, d, cost, runtime=0):
        """
        :param cost_model: instance of :py:class:`lattice_reduction_estimation.reduction_cost_models.CostModel`
        :param block_size: block size
        :param d: lattice dimension
        :param cost: cost (not in log domain)
        :param runtime: runtime [s]
        """
        self.cost_model = cost_model
        self.c_name = cost_model_name(cost_model)
        self.block_size = block_size
        self.d = d
        self.cost = cost
        self.runtime = runtime

    @property
    def sec(self):
        """
        Bit security, ``max(0, log2(cost))``.
        """
        return max(0.0, float(np.log2(self.cost)))

    def to_dict(self):
        """
        :returns: JSON-serializable dict
        """
        return {
            "cost_model": self.c_name,
            "params": {"block_size": self.block_size, "d": self.d},
            "delta": float(bkz_delta(self.block_size)),
            "sec": self.sec,
            "cost": float(self.cost),
            "runtime": self.runtime,
        }

    def __str__(self) -> str:
        return f'\n\tEstimate for "{self.c_name}" (β={self.block_size}, d={self.d}): \n\tsec: {self.sec:.1f} (took {self.runtime:.4f}s)'


class AggregateEstimate:
    """
    Encapsulates estimates of all cost models of a configuration.
    """

    def __init__(self, config: Configuration, runtime=0):
        """
        :param config: instance of :py:class:`Configuration`

        :ivar lowest_sec: lowest found security estimate
        :ivar runtime: total runtime
        """
        self.config = config
        self.results = []
        self.lowest_sec = np.inf
        self.runtime = runtime

    def add_estimate(self, estimate: ReductionCostEstimate):
        """
        Adds estimate and updates ``lowest_sec`` and ``runtime``.

        :param estimate: instance of :class:`ReductionCostEstimate`
        """
        self.results.append(estimate)
        self.runtime += estimate.runtime
        if estimate.sec < self.lowest_sec:
            self.lowest_sec = estimate.sec

    def get_estimates(self, sort_by_cost=False):
        """
        :param sort_by_cost: if ``True`` list is sorted in ascending order by cost
        """
        if sort_by_cost:
            return sorted(self.results, key=lambda x: x.cost)
        return list(self.results)

    def best(self):
        """
        :returns: estimate with the lowest cost
        """
        return min(self.results, key=lambda x: x.cost)

    def is_secure(self, sec):
        """
        :param sec: required bit security
        :returns: ``True`` if all cost models yield at least ``sec`` bits
        """
        return self.lowest_sec >= sec

    def to_dict(self):
        return {
            "lowest_sec": float(self.lowest_sec),
            "runtime": self.runtime,
            "estimates": [x.to_dict() for x in self.results],
        }

    def __str__(self) -> str:
        return f"Lowest security: {self.lowest_sec:.1f}" + "".join(str(x) for x in self.results)


def estimate(config: Configuration, block_size, d, q=None, bit_size=None):
    """
    Evaluate BKZ-β on a ``d``-dimensional lattice with all cost models selected in ``config``.

    :param config: instance of :py:class:`Configuration`
    :param block_size: block size
    :param d: lattice dimension
    :param q: modulus
    :param bit_size: bitsize of the basis entries used for the LLL cost
    :returns: instance of :py:class:`AggregateEstimate`
    :raises EmptyConfiguration: if no cost model is selected
    :raises InvalidParameters: if ``config.check_parameters`` and parameters violate the preconditions
    """
    if config.check_parameters:
        check_parameters(block_size, d, q=q)

    cost_models = config.cost_models()
    if not cost_models:
        raise EmptyConfiguration("Could not find any cost models for given configuration.")

    alg_logger.debug(f"Running estimates for {len(cost_models)} cost models. β={block_size}, d={d}, q={q}")
    results = AggregateEstimate(config)
    for cost_model in cost_models:
        start = time.time()
        cost = bkz_cost(cost_model, block_size, d, q, bit_size)
        result = ReductionCostEstimate(cost_model, block_size, d, cost, runtime=time.time() - start)
        alg_logger.info(str(result))
        results.add_estimate(result)

    alg_logger.debug(SEPARATOR)
    return results
