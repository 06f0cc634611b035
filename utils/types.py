from dataclasses import dataclass, field
from enum import IntEnum
from typing import Dict, Mapping, Sequence, Tuple, Union, TypeAlias

import numpy as np

SYMBOLS_COUNT = 256

Bits: TypeAlias = Tuple[bool, ...]
CodeTable: TypeAlias = Dict[int, Bits]
FrequencyTable: TypeAlias = Union[Sequence[int], Mapping[int, int], np.ndarray]


@dataclass(frozen=True)
class Leaf:
    symbol: int


@dataclass(frozen=True)
class Internal:
    left: 'Node'
    right: 'Node'


Node: TypeAlias = Union[Leaf, Internal]


class TieBreak(IntEnum):
    INSERTION = 0
    SYMBOL = 1


# Heap entry, compared by (freq, order) only
@dataclass(order=True)
class PriorityEntry:
    freq: int
    order: int
    node: Node = field(compare=False)
