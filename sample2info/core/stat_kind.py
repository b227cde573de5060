from enum import Enum
from typing import Sequence

import numpy as np

from sample2info.utils.user_error import UserError


class UnknownStatKind(UserError):
    pass


def mean(values: Sequence[float]) -> float:
    return float(np.mean(values))


def median(values: Sequence[float]) -> float:
    """ Select the middle element, taking the upper one of an even count.

    This is not the textbook median: [1, 2, 3, 4] gives 3, not 2.5.
    """
    n = len(values) // 2
    return float(np.partition(values, n)[n])


def minimum(values: Sequence[float]) -> float:
    return float(np.min(values))


def maximum(values: Sequence[float]) -> float:
    return float(np.max(values))


class StatKind(Enum):
    MEAN = 'mean'
    MEDIAN = 'median'
    MIN = 'min'
    MAX = 'max'

    def compute(self, values: Sequence[float]) -> float:
        try:
            calculate = STAT_FUNCTIONS[self]
        except KeyError:
            raise UnknownStatKind('Unrecognized statistic: %s.', self.value)
        return calculate(values)


STAT_FUNCTIONS = {StatKind.MEAN: mean,
                  StatKind.MEDIAN: median,
                  StatKind.MIN: minimum,
                  StatKind.MAX: maximum}
