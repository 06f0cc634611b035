import heapq
from collections.abc import Mapping
from typing import List, Optional

from .types import Bits, CodeTable, FrequencyTable, Internal, Leaf, Node, PriorityEntry, TieBreak, SYMBOLS_COUNT


def _to_count(freq) -> int:
    count = int(freq)
    if count != freq:
        raise ValueError(f"Frequency counts must be integers, got {freq!r}.")
    if count < 0:
        raise ValueError("Frequency table cannot contain negative counts.")
    return count


def validate_frequencies(frequencies: FrequencyTable) -> List[int]:
    if isinstance(frequencies, Mapping):
        unknown = [symbol for symbol in frequencies if symbol not in range(SYMBOLS_COUNT)]
        if unknown:
            raise ValueError(f"Frequency table keys must be byte values 0-255, got {unknown!r}.")
        return [_to_count(frequencies.get(symbol, 0)) for symbol in range(SYMBOLS_COUNT)]

    if len(frequencies) != SYMBOLS_COUNT:
        raise ValueError(f"Frequency table must have {SYMBOLS_COUNT} entries, got {len(frequencies)}.")

    return [_to_count(freq) for freq in frequencies]


def build_huffman_tree(frequencies: FrequencyTable, tie_break: TieBreak = TieBreak.INSERTION) -> Optional[Node]:
    """
    Builds a Huffman tree from a table of 256 byte counts.

    Parameters:
        frequencies: Counts indexed by byte value.
        tie_break: Secondary ordering key for entries with equal counts.

    Returns:
        Root of the tree, a single Leaf when only one symbol occurs,
        or None when every count is zero.
    """
    counts = validate_frequencies(frequencies)

    heap = [PriorityEntry(freq, symbol, Leaf(symbol)) for symbol, freq in enumerate(counts) if freq > 0]
    heapq.heapify(heap)

    if not heap:
        return None

    if len(heap) == 1:
        return heap[0].node

    next_order = SYMBOLS_COUNT
    while len(heap) > 1:
        left = heapq.heappop(heap)
        right = heapq.heappop(heap)

        match tie_break:
            case TieBreak.INSERTION:
                order = next_order
                next_order += 1
            case TieBreak.SYMBOL:
                order = min(left.order, right.order)
            case _:
                raise ValueError(f"Unsupported tie break: {tie_break!r}")

        merged = PriorityEntry(left.freq + right.freq, order, Internal(left.node, right.node))
        heapq.heappush(heap, merged)

    return heap[0].node


def build_huffman_codes(node: Node, prefix: Bits = (), codes: Optional[CodeTable] = None) -> CodeTable:
    if codes is None:
        codes = {}

    match node:
        case Leaf(symbol=symbol):
            codes[symbol] = prefix
        case Internal(left=left, right=right):
            build_huffman_codes(left, prefix + (False,), codes)
            build_huffman_codes(right, prefix + (True,), codes)

    return codes

