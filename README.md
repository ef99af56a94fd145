# mcutools

Small, dependency-free helpers for numbers, statistics and text output.
Everything is plain Python; the package needs nothing beyond the standard
library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

| Module | What it provides |
| --- | --- |
| `mcutools.fraction` | `Fraction`: a fraction kept in lowest terms with its denominator held to at most 10000. It can be built from an int, a float or a numerator and denominator. Arithmetic, comparisons, `to_float`, `is_proper`, `to_angle`, and the static helpers `Fraction.mediant` and `Fraction.with_denominator`. |
| `mcutools.complex` | `Complex`: an immutable complex number with arithmetic, `from_polar`, `phase`, `modulus`, `conjugate`, `reciprocal`, powers and logarithms (`sqr`, `sqrt`, `exp`, `log`, `log10`, `logn`, `pow`), and the circular and hyperbolic functions, their reciprocals and inverses (`sin` … `acoth`). |
| `mcutools.angle` | `Angle`: degrees, minutes, seconds and ten-thousandths of a second. Build from parts, `Angle.from_float`, `Angle.parse` or `Angle.from_radians`; add, subtract, negate, compare, scale by a number, or divide by another angle for a ratio. `format` takes an `AngleFormat` (`D`, `M`, `S`, `T`) to choose how much is shown. |
| `mcutools.histogram` | `Histogram`: counts values into `len(bounds) + 1` buckets, with `bucket`, `frequency`, `pmf`, `cdf`, `val` (the bound at which a cumulative probability is reached) and `find`. |
| `mcutools.running_average` | `RunningAverage`: the last N values (N from 1 to 255) in a circular buffer, with `average`, `fast_average`, the overall `minimum`/`maximum` since the last clear, and `min_in_buffer`/`max_in_buffer`. |
| `mcutools.running_median` | `RunningMedian`: the last N values (N clamped to 1..19), with `median`, `average` (of all values or of the values around the median), `highest`, `lowest`, `sorted_element` and `predict`. |
| `mcutools.fastmap` | `FastMap`: linear mapping from one range onto another, its inverse `back`, and clamped variants. |
| `mcutools.multimap` | `multi_map`: piecewise linear interpolation through a table of points, clamped at the ends. With integers only, the result is an integer. |
| `mcutools.byteset` | `ByteSet`: a mutable set of integers 0–255 stored as a bitmap, with union, difference, intersection, subset test, `invert`, and a cursor moved by `first`, `next`, `prev` and `last`. |
| `mcutools.stopwatch` | `StopWatch`: start, stop, resume and reset; counts whole ticks of a `Resolution` (`MILLIS`, `MICROS`, `SECONDS`). The clock can be passed in. |
| `mcutools.distance_table` | `DistanceTable`: a symmetric distance matrix that stores only the lower triangle; `dump` returns it as text. |
| `mcutools.xmlwriter` | `XMLWriter`: writes indented XML to a text stream, remembers open tags (at most five deep) and closes them for you; text values are escaped. |
| `mcutools.ieee754` | Functions that inspect and adjust the sign, exponent and mantissa of 32-bit floats, and pack a float into, or unpack it from, the eight bytes of a 64-bit double. |
| `mcutools.temperature` | `fahrenheit`, `kelvin`, `dew_point`, `dew_point_fast`, `humidex`, `heat_index`, `heat_index_fast` and `heat_index_fast_int`. |

## Examples

```python
from mcutools.fraction import Fraction
from mcutools.complex import Complex
from mcutools.angle import Angle
from mcutools.running_average import RunningAverage
from mcutools.fastmap import FastMap
from mcutools.multimap import multi_map

print(Fraction(1, 3) + Fraction(1, 6))        # 1/2
print(Fraction(0.75))                          # 3/4

z = Complex(3, 4)
print(z.modulus())                             # 5.0

a = Angle(10, 30)
print(a + Angle(5, 45))                        # 16.15'00"0000

ra = RunningAverage(4)
for v in (1, 2, 3, 4, 5):
    ra.add(v)
print(ra.average())                            # 3.5

fm = FastMap(0, 1023, 0, 5.0)
print(fm.constrained_map(2000))                # 5.0

print(multi_map(15, [10, 20, 30], [100, 200, 500]))      # 150
print(multi_map(15.0, [10, 20, 30], [100, 200, 500]))    # 150.0
```

A stopwatch driven by a clock of your own:

```python
from mcutools.stopwatch import Resolution, StopWatch

now = [0.0]
sw = StopWatch(Resolution.MILLIS, clock=lambda: now[0])
sw.start()
now[0] = 1.25
print(sw.value())                              # 1250
```

Writing XML:

```python
import io
from mcutools.xmlwriter import XMLWriter

buf = io.StringIO()
xml = XMLWriter(buf)
xml.header()
xml.tag_open("root")
xml.write_node("value", 42)
xml.tag_close()
print(buf.getvalue())
# <?xml version="1.0" encoding="UTF-8"?>
# <root>
#   <value>42</value>
# </root>
```

## What it does not do

This is a library only: it has no command-line program, and it does no
input or output of its own beyond writing to the stream you hand to
`XMLWriter` and returning text from `DistanceTable.dump` and
`ieee754.dump_float`.