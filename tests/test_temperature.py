import pytest

from mcutools import temperature as t


def test_fahrenheit_fixed_points():
    assert t.fahrenheit(0) == 32
    assert t.fahrenheit(-40) == pytest.approx(-40)


def test_kelvin():
    assert t.kelvin(0) == 273.15
    assert t.kelvin(-273.15) == 0


@pytest.mark.parametrize("c", [0.0, 15.0, 30.0])
def test_dew_point_at_saturation(c):
    assert t.dew_point(c, 100) == pytest.approx(c, abs=0.5)
    assert t.dew_point_fast(c, 100) == pytest.approx(c)


@pytest.mark.parametrize("c,h", [(20.0, 50.0), (30.0, 80.0), (5.0, 30.0)])
def test_dew_point_below_temperature(c, h):
    assert t.dew_point(c, h) < c
    assert t.dew_point_fast(c, h) < c


@pytest.mark.parametrize("c,h", [(20.0, 50.0), (30.0, 80.0), (10.0, 60.0)])
def test_fast_dew_point_close(c, h):
    assert abs(t.dew_point(c, h) - t.dew_point_fast(c, h)) <= 0.6544


def test_dew_point_rises_with_humidity():
    assert t.dew_point(25, 40) < t.dew_point(25, 60) < t.dew_point(25, 90)


def test_humidex_rises_with_dew_point():
    assert t.humidex(30, 10) < t.humidex(30, 20)
    assert t.humidex(30, 20) > 30


def test_heat_index_constant_term():
    assert t.heat_index(0, 0) == -42.379
    assert t.heat_index_fast(0, 0) == -42.379


def test_int_heat_index_truncates_toward_zero():
    assert t.heat_index_fast_int(0, 0) == int((-43396 + 512) / 1024)


def test_dew_point_zero_humidity_raises():
    with pytest.raises(ValueError):
        t.dew_point_fast(20, 0)