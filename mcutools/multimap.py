"""Piecewise linear interpolation through a table of points."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Sequence


def _is_int(x: object) -> bool:
    return isinstance(x, int)


def multi_map(value, inputs: Sequence, outputs: Sequence):
    """Map value through the points (inputs[i], outputs[i]).

    inputs must be increasing. Values outside the table are clamped to its
    ends. When every number involved is an integer the interpolation uses
    integer division truncating toward zero.
    """
    if len(inputs) != len(outputs):
        raise ValueError("inputs and outputs must have the same length")
    if not inputs:
        raise ValueError("the table must hold at least one point")
    if value <= inputs[0]:
        return outputs[0]
    if value >= inputs[-1]:
        return outputs[-1]

    pos = bisect_left(inputs, value, 1)
    if value == inputs[pos]:
        return outputs[pos]

    x0, x1 = inputs[pos - 1], inputs[pos]
    y0, y1 = outputs[pos - 1], outputs[pos]
    num = (value - x0) * (y1 - y0)
    den = x1 - x0
    if all(_is_int(v) for v in (value, x0, x1, y0, y1)):
        q = abs(num) // abs(den)
        if (num < 0) != (den < 0):
            q = -q
        return q + y0
    return num / den + y0