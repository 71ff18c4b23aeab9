import numpy as np
import pytest

from lattice_reduction_estimation import constants
from lattice_reduction_estimation.reduction import bkz_delta
from lattice_reduction_estimation.simulator import gsa_simulator, zgsa_simulator, zgsa_slope


def test_gsa_cn11():
    profile = gsa_simulator(213, 128, 2048, 40)
    assert np.sum(np.log(profile)) == pytest.approx(1296.18522764710, abs=1e-2)


def test_gsa_shape():
    d = 213
    profile = gsa_simulator(d, 128, 2048, 60)
    assert len(profile) == d
    assert np.all(profile > 0)
    assert np.all(np.diff(profile) < 0)
    ratio = np.log2(profile[0] / profile[1]) / 4
    assert ratio == pytest.approx(np.log2(bkz_delta(60)))


def test_gsa_inhomogeneous():
    d, n, q = 213, 128, 2048
    profile = gsa_simulator(d, n, q, 40, approx=2.0)
    assert len(profile) == d
    assert np.sum(np.log2(profile)) == pytest.approx(2 * (np.log2(q) * (d - n - 1) + 1))


def test_zgsa_slope():
    assert zgsa_slope(40) == constants.SMALL_SLOPE_T8[40]
    assert zgsa_slope(60) == constants.SMALL_SLOPE_T8[60]
    asymptotic = 2 * np.log2(bkz_delta(70))
    assert zgsa_slope(70) == pytest.approx(asymptotic)
    assert zgsa_slope(100) == zgsa_slope(70)
    assert zgsa_slope(65) == pytest.approx((constants.SMALL_SLOPE_T8[60] + asymptotic) / 2)


def test_zgsa_shape():
    d, n, q = 213, 128, 2048
    profile = zgsa_simulator(d, n, q, 40)
    assert len(profile) == d
    assert np.all(profile > 0)
    assert np.all(np.diff(profile) <= 0)
    # the sloped region keeps the volume of the q-ary lattice
    assert np.sum(np.log(profile)) == pytest.approx(2 * np.log2(q) * (d - n))


def test_zgsa_flat_regions():
    d, n, q = 213, 128, 4
    profile = zgsa_simulator(d, n, q, 2)
    assert len(profile) == d
    assert profile[0] == pytest.approx(np.exp(2 * np.log2(q)))
    assert profile[-1] == pytest.approx(1.0)
    assert np.all(np.diff(profile) <= 0)


def test_zgsa_inhomogeneous():
    d, n, q = 100, 40, 2048
    profile = zgsa_simulator(d, n, q, 80, approx=3.0)
    assert len(profile) == d
    assert np.all(profile > 0)
    assert np.all(np.diff(profile) <= 0)


@pytest.mark.parametrize("simulator", [gsa_simulator, zgsa_simulator])
@pytest.mark.parametrize("d,n,q,beta", [(50, 10, 257, 2), (213, 128, 2048, 61), (512, 256, 12289, 300)])
def test_profile_length(simulator, d, n, q, beta):
    profile = simulator(d, n, q, beta)
    assert len(profile) == d
    assert np.all(profile > 0)
