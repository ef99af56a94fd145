"""Small numeric, statistics and formatting helpers."""

__version__ = "0.1.0"

__all__ = [
    "angle",
    "byteset",
    "complex",
    "distance_table",
    "fastmap",
    "fraction",
    "histogram",
    "ieee754",
    "multimap",
    "running_average",
    "running_median",
    "stopwatch",
    "temperature",
    "xmlwriter",
]