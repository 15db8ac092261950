import math

import pytest

from terrain.noise import HeightField, simplex_sampler


def test_remap_endpoints():
    hf = HeightField(lambda x, y: 0.0)
    assert hf.remap(-1.0) == 0.0
    assert hf.remap(1.0) == pytest.approx(10.0)
    assert hf.remap(0.0) == pytest.approx(0.5 ** 1.5 * 10.0)
    # out of contract samples are clamped
    assert hf.remap(2.0) == pytest.approx(10.0)
    assert hf.remap(-3.0) == 0.0


def test_sampler_sees_scaled_indices():
    calls = []

    def sampler(x, y):
        calls.append((x, y))
        return 0.0

    HeightField(sampler).sample(3, -4)
    assert calls == [pytest.approx((0.3, -0.4))]


def test_simplex_heights_deterministic_and_bounded():
    a = HeightField(simplex_sampler(7))
    b = HeightField(simplex_sampler(7))
    for column in range(-20, 21, 3):
        for row in range(-20, 21, 3):
            h = a.sample(column, row)
            assert h == b.sample(column, row)
            assert 0.0 <= h <= 10.0


def test_seed_changes_field():
    a = HeightField(simplex_sampler(1))
    b = HeightField(simplex_sampler(2))
    pts = [(c, r) for c in range(-5, 6) for r in range(-5, 6)]
    assert [a.sample(*p) for p in pts] != [b.sample(*p) for p in pts]


@pytest.mark.parametrize("bad", [math.nan, math.inf, -math.inf])
def test_non_finite_samples_fall_back(bad):
    hf = HeightField(lambda x, y: bad)
    assert hf.sample(1, 1) == 0.0
    assert hf.sample(2, 1) == 0.0
    assert hf.anomalies == 2
