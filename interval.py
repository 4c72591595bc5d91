from typing import Union

import numpy as np

Number = Union[int, float]


class Interval:
    """Real interval with independently open or closed ends."""
    a: Number
    b: Number
    left_open: bool
    right_open: bool

    @staticmethod
    def closed(l: Number, r: Number):
        return Interval(l, r, False, False)

    def __init__(self, l: Number, r: Number, lo: bool = False, ro: bool = True):
        self.a = l
        self.b = r
        self.left_open = lo
        self.right_open = ro

    def is_empty(self):
        return self.a > self.b or (
            self.a == self.b and (self.left_open or self.right_open)
        )

    def mask(self, values, tol: float = 0.0) -> np.ndarray:
        """Boolean mask of the values lying in the interval widened by tol on both ends."""
        values = np.asarray(values, dtype=float)
        if self.is_empty():
            return np.zeros(values.shape, dtype=bool)
        lo = self.a - tol
        hi = self.b + tol
        above = values > lo if self.left_open else values >= lo
        below = values < hi if self.right_open else values <= hi
        return above & below


UNIT = Interval.closed(0, 1)
