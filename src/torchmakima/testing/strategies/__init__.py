from ._knot_sequences import knot_sequences
from ._real_numbers import real_numbers

__all__ = [
    "knot_sequences",
    "real_numbers",
]
