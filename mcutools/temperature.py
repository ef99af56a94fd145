"""Temperature conversions, dew point, humidex and heat index."""

from __future__ import annotations

import math


def fahrenheit(celsius: float) -> float:
    return 1.8 * celsius + 32


def kelvin(celsius: float) -> float:
    return celsius + 273.15


def dew_point(celsius: float, humidity: float) -> float:
    """Dew point in Celsius by the NOAA formula; humidity in percent."""
    a0 = 373.15 / (273.15 + celsius)
    total = -7.90298 * (a0 - 1)
    total += 5.02808 * math.log10(a0)
    total += -1.3816e-7 * (math.pow(10, 11.344 * (1 - 1 / a0)) - 1)
    total += 8.1328e-3 * (math.pow(10, -3.49149 * (a0 - 1)) - 1)
    total += math.log10(1013.246)
    vp = math.pow(10, total - 3) * humidity
    t = math.log(vp / 0.61078)
    return (241.88 * t) / (17.558 - t)


def dew_point_fast(celsius: float, humidity: float) -> float:
    """A faster dew point approximation, within about 0.65 degrees of dew_point."""
    a = 17.271
    b = 237.7
    temp = (a * celsius) / (b + celsius) + math.log(humidity / 100)
    return (b * temp) / (a - temp)


def humidex(celsius: float, dew_point: float) -> float:
    e = 19.833625 - 5417.753 / (273.16 + dew_point)
    return celsius + 3.3941 * math.exp(e) - 5.555


def heat_index(tf: float, r: float) -> float:
    """Heat index for a temperature in Fahrenheit and humidity in percent."""
    c1 = -42.379
    c2 = 2.04901523
    c3 = 10.14333127
    c4 = -0.22475541
    c5 = -0.00683783
    c6 = -0.05481717
    c7 = 0.00122874
    c8 = 0.00085282
    c9 = -0.00000199
    a = ((c5 * tf) + c2) * tf + c1
    b = (((c7 * tf) + c4) * tf + c3) * r
    c = (((c9 * tf) + c8) * tf + c6) * r * r
    return a + b + c


def heat_index_fast(tf: float, r: float) -> float:
    """Heat index with fewer terms: faster and slightly less accurate."""
    c1 = -42.379
    c2 = 2.04901523
    c3 = 10.14333127
    c4 = -0.22475541
    return (c2 * tf + c1) + (c4 * tf + c3) * r


def heat_index_fast_int(tf: int, r: int) -> int:
    """Integer heat index using constants scaled by 1024, rounded."""
    c1 = -43396
    c2 = 2098
    c3 = 10387
    c4 = -230
    total = (c2 * tf + c1) + (c4 * tf + c3) * r + 512
    q = abs(total) // 1024
    return -q if total < 0 else q