import json
import logging

import numpy as np
import pytest

import lattice_reduction_estimation
from lattice_reduction_estimation import reduction_cost_models as rcm
from lattice_reduction_estimation.algorithms import (
    Configuration,
    EmptyConfiguration,
    ReductionCostEstimate,
    estimate,
)
from lattice_reduction_estimation.reduction import InvalidParameters, bkz_cost
from lattice_reduction_estimation.reduction_cost_models import CostModel


def test_default_configuration():
    cost_models = Configuration().cost_models()
    assert len(cost_models) == len(rcm.BKZ_COST_MODELS)
    assert cost_models[0] == CostModel(rcm.CHALOY_SIEVE)
    assert cost_models[-1] == CostModel(rcm.CHENGUE_ENUM)


def test_configuration_filters():
    classical = Configuration(quantum=False).cost_models()
    assert CostModel(rcm.ADPS_SIEVE, classical=False) not in classical
    assert CostModel(rcm.Q_SIEVE) not in classical
    assert CostModel(rcm.KYBER) in classical

    quantum_sieving = Configuration(classical=False, enumeration=False, combined=False).cost_models()
    assert set(quantum_sieving) == {
        CostModel(rcm.CHALOY_SIEVE),
        CostModel(rcm.ADPS_SIEVE, classical=False),
        CostModel(rcm.Q_SIEVE),
    }

    enumeration = Configuration(sieving=False, combined=False).cost_models()
    assert all(c.kind in rcm.ENUMERATION for c in enumeration)


def test_custom_cost_models():
    cost_models = [CostModel(rcm.MATZOV, classical=False), CostModel(rcm.LOTUS_ENUM)]
    config = Configuration(sieving=False, cost_models=cost_models)
    assert config.cost_models() == cost_models

    with pytest.raises(EmptyConfiguration):
        Configuration(cost_models=[])
    with pytest.raises(ValueError):
        Configuration(cost_models=[CostModel("svp-by-magic")])


def test_estimate():
    config = Configuration()
    result = estimate(config, 500, 1024, 0)
    estimates = result.get_estimates()
    assert len(estimates) == len(config.cost_models())
    assert result.lowest_sec == pytest.approx(min(x.sec for x in estimates))
    assert result.best().cost_model == CostModel(rcm.CHALOY_SIEVE)
    assert result.lowest_sec == pytest.approx(0.257 * 500 + 13, abs=1e-3)
    assert result.is_secure(128)
    assert not result.is_secure(150)

    costs = [x.cost for x in result.get_estimates(sort_by_cost=True)]
    assert costs == sorted(costs)


def test_estimate_bit_size():
    config = Configuration(cost_models=[CostModel(rcm.BJG_SIEVE)])
    result = estimate(config, 100, 200, 3329, bit_size=12)
    assert result.best().cost == pytest.approx(bkz_cost(CostModel(rcm.BJG_SIEVE), 100, 200, 3329, bit_size=12))


def test_estimate_parameters():
    with pytest.raises(InvalidParameters):
        estimate(Configuration(), 600, 500, 3329)
    with pytest.raises(InvalidParameters):
        estimate(Configuration(), 100, 500, 1)

    result = estimate(Configuration(check_parameters=False), 600, 500, 0)
    assert all(np.isfinite(x.cost) for x in result.get_estimates())


def test_estimate_empty():
    with pytest.raises(EmptyConfiguration):
        estimate(Configuration(classical=False, quantum=False), 100, 500)


def test_to_dict():
    result = estimate(Configuration(quantum=False), 300, 700, 12289)
    data = json.loads(json.dumps(result.to_dict()))
    assert len(data["estimates"]) == len(result.get_estimates())
    assert data["lowest_sec"] == pytest.approx(result.lowest_sec)
    assert data["estimates"][0]["params"] == {"block_size": 300, "d": 700}


def test_estimate_str():
    single = ReductionCostEstimate(CostModel(rcm.ADPS_SIEVE), 100, 200, 2.0**80)
    assert single.sec == pytest.approx(80)
    assert '"ADPS-Sieve"' in str(single)
    assert "Lowest security" in str(estimate(Configuration(), 100, 200))


def test_estimation_logging(caplog):
    lattice_reduction_estimation.Logging.set_estimation_debug_logging_level(logging.INFO)
    config = Configuration(classical=False)
    with caplog.at_level(logging.INFO, logger="lattice_reduction_estimation.algorithms.estimation_logging"):
        estimate(config, 200, 400)
    records = [r for r in caplog.records if r.name.endswith("estimation_logging")]
    assert len(records) == len(config.cost_models())
