import pytest

from huffpack.errors import CorruptContainer, TruncatedContainer
from huffpack.mem.bitpack import encode_bits, pack_bits, unpack_symbols
from huffpack.mem.freq import build_freqs
from huffpack.mem.huffman import build_codebook, build_tree


def _abc_tree():
    # a:"0", c:"10", b:"11"
    root, codes, _n = build_codebook(build_freqs(b"aaabbc"))
    return root, codes


def test_pack_empty():
    assert pack_bits("") == (b"", 0)


def test_pack_partial_last_byte():
    assert pack_bits("000111110") == (b"\x1f\x00", 1)
    assert pack_bits("101") == (b"\xa0", 3)


def test_pack_full_last_byte_reports_eight():
    assert pack_bits("10101010") == (b"\xaa", 8)
    assert pack_bits("1" * 16) == (b"\xff\xff", 8)


def test_encode_bits_follows_input_order():
    _root, codes = _abc_tree()
    assert encode_bits(b"aaabbc", codes) == "000111110"


def test_unpack_stops_at_trailing_bits():
    root, codes = _abc_tree()
    payload, trailing = pack_bits(encode_bits(b"aaabbc", codes))
    assert (len(payload), trailing) == (2, 1)
    assert unpack_symbols(payload, trailing, root) == b"aaabbc"
    # reading the padding as data would emit seven extra 'a'
    assert unpack_symbols(payload, 8, root) == b"aaabbc" + b"a" * 7


def test_unpack_empty_payload():
    root, _codes = _abc_tree()
    assert unpack_symbols(b"", 0, root) == b""
    with pytest.raises(CorruptContainer):
        unpack_symbols(b"", 3, root)


def test_unpack_rejects_out_of_range_trailing_bits():
    root, _codes = _abc_tree()
    with pytest.raises(CorruptContainer):
        unpack_symbols(b"\x00", 0, root)
    with pytest.raises(CorruptContainer):
        unpack_symbols(b"\x00", 9, root)


def test_unpack_dead_end():
    root = build_tree({65: 4})  # only a left child
    with pytest.raises(TruncatedContainer):
        unpack_symbols(b"\x80", 1, root)


def test_unpack_ends_mid_code():
    root, _codes = _abc_tree()
    with pytest.raises(TruncatedContainer):
        unpack_symbols(b"\x80", 1, root)
