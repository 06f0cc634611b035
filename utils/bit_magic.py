from typing import Iterable
import numpy as np
from .types import Bits, CodeTable, FrequencyTable
from .huffman import validate_frequencies


def bits_to_string(bits: Iterable[bool]) -> str:
    return ''.join('1' if bit else '0' for bit in bits)


def calculate_entropy(frequencies: FrequencyTable) -> float:
    counts = np.asarray(validate_frequencies(frequencies), dtype=np.float64)
    total = counts.sum()
    if total <= 0:
        return 0.0

    probabilities = counts[counts > 0] / total
    return float(-np.sum(probabilities * np.log2(probabilities)))


def calculate_weighted_length(frequencies: FrequencyTable, codes: CodeTable) -> int:
    counts = validate_frequencies(frequencies)
    return sum(counts[symbol] * len(code) for symbol, code in codes.items())


def calculate_average_code_length(frequencies: FrequencyTable, codes: CodeTable) -> float:
    counts = validate_frequencies(frequencies)
    total = sum(counts[symbol] for symbol in codes)
    if total == 0:
        return 0.0
    return calculate_weighted_length(frequencies, codes) / total


def is_prefix_free(codes: CodeTable) -> bool:
    # After sorting, a prefix always lands right before one of its extensions
    sorted_codes = sorted(codes.values())

    def is_prefix(prefix: Bits, code: Bits) -> bool:
        return len(prefix) <= len(code) and code[:len(prefix)] == prefix

    return not any(is_prefix(a, b) for a, b in zip(sorted_codes, sorted_codes[1:]))
