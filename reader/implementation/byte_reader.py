import os
import numpy as np
from tqdm import tqdm
from utils.types import SYMBOLS_COUNT
from ..reader import FrequencyReader

# Counts are kept as 32-bit unsigned integers
MAX_COUNT = np.iinfo(np.uint32).max


def _to_uint32(counts: np.ndarray) -> np.ndarray:
    if counts.max(initial=0) > MAX_COUNT:
        raise OverflowError(f"Byte count exceeds the 32-bit limit of {MAX_COUNT} occurrences.")
    return counts.astype(np.uint32)


def count_byte_frequencies(data: bytes) -> np.ndarray:
    counts = np.bincount(np.frombuffer(data, dtype=np.uint8), minlength=SYMBOLS_COUNT)
    return _to_uint32(counts)


class ByteFrequencyReader(FrequencyReader):
    def __init__(self, chunk_size: int = 1 << 20, verbose=False):
        if chunk_size <= 0:
            raise ValueError("Chunk size must be positive.")
        self.chunk_size = chunk_size
        self.verbose = verbose

    def read(self, path: str) -> np.ndarray:
        counts = np.zeros(SYMBOLS_COUNT, dtype=np.uint64)

        with open(path, "rb") as file, tqdm(total=os.path.getsize(path), unit="B", unit_scale=True,
                                            disable=not self.verbose) as progress:
            while chunk := file.read(self.chunk_size):
                counts += np.bincount(np.frombuffer(chunk, dtype=np.uint8),
                                      minlength=SYMBOLS_COUNT).astype(np.uint64)
                progress.update(len(chunk))

        frequencies = _to_uint32(counts)

        if self.verbose:
            print("ByteFrequencyReader verbose statistics:")
            print(f"- Bytes read: {int(counts.sum())}")
            print(f"- Distinct byte values: {int(np.count_nonzero(frequencies))}")

        return frequencies
