import pytest

from numethods.curvefit import cubic_fit, linear_fit, parabolic_fit

XS = [1.0, 2.0, 3.0, 4.0, 5.0]


def test_linear_fit_sample_data():
    a, b = linear_fit(XS, [2, 3, 5, 7, 11])
    assert a == pytest.approx(2.2)
    assert b == pytest.approx(-1.0)


def test_linear_fit_recovers_exact_line():
    ys = [3 * x - 2 for x in XS]
    assert linear_fit(XS, ys) == pytest.approx((3.0, -2.0))


def test_linear_fit_residuals_sum_to_zero():
    ys = [2, 3, 5, 7, 11]
    a, b = linear_fit(XS, ys)
    assert sum(y - (a * x + b) for x, y in zip(XS, ys)) == pytest.approx(0.0, abs=1e-9)


def test_linear_fit_degenerate():
    with pytest.raises(ValueError):
        linear_fit([2, 2, 2], [1, 2, 3])


def test_parabolic_fit_sample_data():
    assert parabolic_fit(XS, [2, 5, 10, 17, 26]) == pytest.approx((1.0, 0.0, 1.0), abs=1e-9)


def test_parabolic_fit_recovers_exact_parabola():
    xs = [-2.0, -1.0, 0.5, 1.0, 3.0, 4.0]
    ys = [2 * x * x - 3 * x + 4 for x in xs]
    assert parabolic_fit(xs, ys) == pytest.approx((2.0, -3.0, 4.0), abs=1e-9)


def test_parabolic_fit_degenerate():
    with pytest.raises(ValueError):
        parabolic_fit([1, 2], [1, 2])


@pytest.mark.parametrize("fit", [linear_fit, parabolic_fit, cubic_fit])
def test_mismatched_lengths(fit):
    with pytest.raises(ValueError):
        fit([1, 2, 3], [1, 2])


@pytest.mark.parametrize("fit", [linear_fit, parabolic_fit, cubic_fit])
def test_empty_data(fit):
    with pytest.raises(ValueError):
        fit([], [])


def test_cubic_fit_zero_data_gives_zero_coefficients():
    assert cubic_fit(XS, [0, 0, 0, 0, 0]) == pytest.approx((0.0, 0.0, 0.0, 0.0))


def test_cubic_fit_scales_with_y():
    ys = [2.0, 3.0, 5.0, 7.0, 11.0]
    base = cubic_fit(XS, ys)
    scaled = cubic_fit(XS, [3 * y for y in ys])
    assert scaled == pytest.approx(tuple(3 * c for c in base))


def test_cubic_fit_is_additive_in_y():
    y1 = [2.0, 3.0, 5.0, 7.0, 11.0]
    y2 = [1.0, -4.0, 0.5, 2.0, 9.0]
    combined = cubic_fit(XS, [a + b for a, b in zip(y1, y2)])
    separate = [p + q for p, q in zip(cubic_fit(XS, y1), cubic_fit(XS, y2))]
    assert combined == pytest.approx(tuple(separate))


def test_cubic_fit_degenerate():
    with pytest.raises(ValueError):
        cubic_fit([1, 1], [1, 2])