from .coder import PrefixCoder, Coding
from .implementation.huffman_coder import HuffmanCoder
from utils.types import TieBreak
