from abc import ABC, abstractmethod
from utils.types import *
from enum import IntEnum
from typing import Optional


class Coding(IntEnum):
    HUFFMAN = 0


class PrefixCoder(ABC):
    @abstractmethod
    def build(self, frequencies: FrequencyTable) -> Optional[Node]:
        ...

    @abstractmethod
    def assign(self, root: Node) -> CodeTable:
        ...

    def calculate_codes(self, frequencies: FrequencyTable) -> Optional[CodeTable]:
        root = self.build(frequencies)
        if root is None:
            return None
        return self.assign(root)

    @staticmethod
    def create(kind: Coding, **kwargs) -> 'PrefixCoder':
        if kind == Coding.HUFFMAN:
            from .implementation.huffman_coder import HuffmanCoder
            return HuffmanCoder(**kwargs)

        raise NotImplementedError("Coder is not implemented yet for provided coding.")
