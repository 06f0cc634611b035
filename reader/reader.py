from abc import ABC, abstractmethod
import numpy as np


class FrequencyReader(ABC):
    @abstractmethod
    def read(self, path: str) -> np.ndarray:
        ...

    @staticmethod
    def read_from_file(path: str, verbose=False) -> np.ndarray:
        from .implementation.byte_reader import ByteFrequencyReader
        return ByteFrequencyReader(verbose=verbose).read(path)
