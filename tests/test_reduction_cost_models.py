import numpy as np
import pytest

from lattice_reduction_estimation import reduction_cost_models as rcm
from lattice_reduction_estimation.reduction_cost_models import CostModel


def test_bdgl_sieve_regimes():
    assert np.log2(rcm.bdgl_sieve(89)) == pytest.approx(0.387 * 89 + 16.4)
    assert np.log2(rcm.bdgl_sieve(90)) == pytest.approx(0.292 * 90 + 16.4)
    # the experimental regime is more expensive than the asymptotic one at the cut
    assert rcm.bdgl_sieve(89) > rcm.bdgl_sieve(90)


def test_sieve_exponents():
    assert np.log2(rcm.chaloy_sieve(100)) == pytest.approx(25.7)
    assert np.log2(rcm.bjg_sieve(100)) == pytest.approx(31.1)
    assert np.log2(rcm.adps_sieve(100)) == pytest.approx(29.2)
    assert np.log2(rcm.adps_sieve(100, classical=False)) == pytest.approx(26.5)
    assert np.log2(rcm.q_sieve(100)) == pytest.approx(26.5 + 16.4)


def test_chengue_enum():
    beta = 100
    expected = 0.270188776350190 * beta * np.log(beta) - 1.0192050451318417 * beta + 16.10253135200765 + np.log2(100)
    assert np.log2(rcm.chengue_enum(beta)) == pytest.approx(expected)


def test_abf_enum_regimes():
    def small(beta):
        return 0.1839 * beta * np.log2(beta) - 0.995 * beta + 22.25

    def large(beta):
        return 0.125 * beta * np.log2(beta) - 0.547 * beta + 16.4

    assert np.log2(rcm.abf_enum(92)) == pytest.approx(small(92))
    assert np.log2(rcm.abf_enum(93)) == pytest.approx(large(93))
    assert np.log2(rcm.abf_enum(93, classical=False)) == pytest.approx(0.0625 * 93 * np.log2(93))


def test_ablr_enum_regimes():
    assert np.log2(rcm.ablr_enum(97)) == pytest.approx(0.1839 * 97 * np.log2(97) - 1.077 * 97 + 35.12)
    assert np.log2(rcm.ablr_enum(98)) == pytest.approx(0.125 * 98 * np.log2(98) - 0.654 * 98 + 31.84)


def test_lotus_enum():
    assert np.log2(rcm.lotus_enum(200)) == pytest.approx(0.125 * 200 * np.log2(200) - 0.755 * 200 + 22.74)


def test_cost_model_equality():
    assert CostModel(rcm.ADPS_SIEVE) == CostModel(rcm.ADPS_SIEVE, classical=True)
    assert CostModel(rcm.ADPS_SIEVE) != CostModel(rcm.ADPS_SIEVE, classical=False)
    assert CostModel(rcm.KYBER).is_combined()
    assert not CostModel(rcm.LOTUS_ENUM).is_combined()
    assert str(CostModel(rcm.MATZOV, classical=False)) == "matzov-quantum"


def test_registry():
    kinds = {model["cost_model"].kind for model in rcm.BKZ_COST_MODELS}
    assert kinds == set(rcm.ALL)
    for model in rcm.BKZ_COST_MODELS:
        assert model["method"] in ("sieving", "enumeration", "combined")
        assert model["quantum"] == (not model["cost_model"].classical) or model["cost_model"].kind in (
            rcm.Q_SIEVE,
            rcm.CHALOY_SIEVE,
        )
    assert "Reduction Cost Models" in rcm.__doc__
