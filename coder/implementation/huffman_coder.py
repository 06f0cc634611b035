from utils.types import *
from ..coder import PrefixCoder
from utils.bit_magic import *
from utils.huffman import build_huffman_tree, build_huffman_codes, validate_frequencies
from typing import Optional


class HuffmanCoder(PrefixCoder):
    def __init__(self, tie_break: TieBreak = TieBreak.INSERTION, verbose=False):
        """
        Initializes a Huffman Coder.

        Parameters:
            tie_break (TieBreak): Ordering among entries with equal counts.
            verbose (bool): Print code statistics from calculate_codes.
        """
        self.tie_break: TieBreak = tie_break
        self.verbose = verbose

    def build(self, frequencies: FrequencyTable) -> Optional[Node]:
        return build_huffman_tree(frequencies, self.tie_break)

    def assign(self, root: Node) -> CodeTable:
        return build_huffman_codes(root)

    def calculate_codes(self, frequencies: FrequencyTable) -> Optional[CodeTable]:
        codes = super().calculate_codes(frequencies)

        if self.verbose:
            self._print_statistics(frequencies, codes)

        return codes

    def _print_statistics(self, frequencies: FrequencyTable, codes: Optional[CodeTable]) -> None:
        print("HuffmanCoder verbose statistics:")
        if codes is None:
            print("- Distinct symbols: 0")
            return

        counts = validate_frequencies(frequencies)
        print(f"- Distinct symbols: {len(codes)}")
        print(f"- Total symbols: {sum(counts[symbol] for symbol in codes)}")
        print(f"- Entropy (bits per symbol): {calculate_entropy(frequencies):.3f}")
        print(f"- Average code bit length: {calculate_average_code_length(frequencies, codes):.3f}")
        print(f"- Weighted total length (in bits): {calculate_weighted_length(frequencies, codes)}")
        if len(codes) == 1:
            print("- Single symbol received a zero-length code")
