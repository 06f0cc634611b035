import pytest

from coder import Coding, HuffmanCoder, PrefixCoder, TieBreak
from utils.types import Leaf


def test_create_huffman_coder():
    coder = PrefixCoder.create(Coding.HUFFMAN, tie_break=TieBreak.SYMBOL)

    assert isinstance(coder, HuffmanCoder)
    assert coder.tie_break == TieBreak.SYMBOL


def test_create_unknown_coding():
    with pytest.raises(NotImplementedError):
        PrefixCoder.create(99)


def test_calculate_codes_skips_assignment_for_empty_table():
    class RecordingCoder(HuffmanCoder):
        assigned = False

        def assign(self, root):
            self.assigned = True
            return super().assign(root)

    coder = RecordingCoder()

    assert coder.calculate_codes([0] * 256) is None
    assert not coder.assigned


def test_build_and_assign():
    frequencies = [0] * 256
    frequencies[42] = 5
    coder = HuffmanCoder()

    root = coder.build(frequencies)

    assert root == Leaf(42)
    assert coder.assign(root) == {42: ()}


def test_verbose_statistics(capsys):
    frequencies = [0] * 256
    frequencies[0], frequencies[1] = 1, 1

    HuffmanCoder(verbose=True).calculate_codes(frequencies)

    out = capsys.readouterr().out
    assert "HuffmanCoder verbose statistics:" in out
    assert "- Distinct symbols: 2" in out
    assert "- Weighted total length (in bits): 2" in out
    assert "zero-length" not in out


def test_verbose_flags_single_symbol_code(capsys):
    frequencies = [0] * 256
    frequencies[9] = 3

    HuffmanCoder(verbose=True).calculate_codes(frequencies)

    assert "- Single symbol received a zero-length code" in capsys.readouterr().out


def test_verbose_empty_table(capsys):
    HuffmanCoder(verbose=True).calculate_codes([0] * 256)

    assert "- Distinct symbols: 0" in capsys.readouterr().out


def test_verbose_statistics_for_mapping_table(capsys):
    codes = HuffmanCoder(verbose=True).calculate_codes({3: 1, 4: 3})

    assert codes == {3: (False,), 4: (True,)}
    out = capsys.readouterr().out
    assert "- Total symbols: 4" in out
    assert "- Weighted total length (in bits): 4" in out
