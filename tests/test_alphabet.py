import pytest

from kmertools.alphabet import (
    Alphabet2b,
    Alphabet4b,
    Alphabet8b,
    count_non_acgt,
    get_ac_from_tg,
    is_acgt,
)


def test_is_acgt():
    assert all(is_acgt(b) for b in b"ACGT")
    assert not is_acgt(ord("N"))
    assert is_acgt("G")
    assert not is_acgt("a")


def test_get_ac_from_tg():
    assert get_ac_from_tg(ord("T")) == ord("A")
    assert get_ac_from_tg(ord("G")) == ord("C")
    assert get_ac_from_tg(ord("A")) == ord("A")
    assert get_ac_from_tg(ord("N")) == ord("N")


def test_count_non_acgt():
    assert count_non_acgt(b"ACGTACGT") == 0
    assert count_non_acgt(b"ACNNGT") == 2
    assert count_non_acgt("ACGTX") == 1


def test_2b_encoding_values():
    alpha = Alphabet2b()
    assert [alpha.encode(b) for b in b"ACGT"] == [0b00, 0b01, 0b10, 0b11]


def test_2b_encode_decode_roundtrip():
    alpha = Alphabet2b()
    for b in b"ACGT":
        assert alpha.decode(alpha.encode(b)) == b


def test_2b_preserves_order():
    alpha = Alphabet2b()
    codes = [alpha.encode(b) for b in b"ACGT"]
    assert codes == sorted(codes)


def test_2b_errors():
    alpha = Alphabet2b()
    with pytest.raises(ValueError):
        alpha.encode(ord("N"))
    with pytest.raises(ValueError):
        alpha.decode(4)
    with pytest.raises(ValueError):
        alpha.complement(7)


def test_2b_complement():
    alpha = Alphabet2b()
    assert alpha.decode(alpha.complement(alpha.encode(ord("A")))) == ord("T")
    assert alpha.decode(alpha.complement(alpha.encode(ord("C")))) == ord("G")
    for code in range(4):
        assert alpha.complement(alpha.complement(code)) == code


def test_2b_pack_unpack_roundtrip():
    alpha = Alphabet2b()
    for word in (b"ACGT", b"TTGA", b"AAAA", b"GCTA"):
        assert alpha.base_unpack(alpha.base_pack(word)) == word


def test_2b_pack_value():
    assert Alphabet2b().base_pack(b"ACGT") == 0b00011011


def test_2b_pack_too_short():
    with pytest.raises(ValueError):
        Alphabet2b().base_pack(b"ACG")


def test_2b_invalid_count():
    alpha = Alphabet2b()
    assert alpha.nb_invalid_bases(b"ACGT") == 0
    assert alpha.nb_invalid_bases(b"ACNT") == 1


def test_4b_encoding_values():
    alpha = Alphabet4b()
    assert alpha.encode(ord("A")) == 0b0001
    assert alpha.encode(ord("N")) == 0b1111
    assert alpha.encode(ord("Z")) == 0


def test_4b_roundtrip_and_unknown():
    alpha = Alphabet4b()
    for b in b"ACGTN":
        assert alpha.decode(alpha.encode(b)) == b
    assert alpha.decode(0) == ord("Z")
    assert alpha.decode(0b0011) == ord("Z")
    with pytest.raises(ValueError):
        alpha.encode(ord("X"))


def test_4b_complement():
    alpha = Alphabet4b()
    pairs = {"A": "T", "C": "G", "G": "C", "T": "A", "N": "N"}
    for base, comp in pairs.items():
        assert alpha.decode(alpha.complement(alpha.encode(base))) == ord(comp)
    with pytest.raises(ValueError):
        alpha.complement(0)


def test_4b_pack_unpack_roundtrip():
    alpha = Alphabet4b()
    for word in (b"AC", b"GT", b"NA", b"TN"):
        assert alpha.base_unpack(alpha.base_pack(word)) == word
    assert alpha.base_unpack(alpha.base_pack(b"AZ")) == b"AZ"


def test_4b_validity():
    alpha = Alphabet4b()
    assert alpha.is_valid_base(ord("N"))
    assert not alpha.is_valid_base(ord("Z"))
    assert alpha.nb_invalid_bases(b"ACGTNX") == 1


def test_8b_identity_and_complement():
    alpha = Alphabet8b()
    for b in b"ACGT":
        assert alpha.decode(alpha.encode(b)) == b
        assert alpha.complement(alpha.complement(b)) == b
    assert alpha.complement(ord("A")) == ord("T")
    with pytest.raises(ValueError):
        alpha.complement(ord("N"))


def test_8b_pack_and_validity():
    alpha = Alphabet8b()
    assert alpha.base_pack(b"GATTACA") == ord("G")
    assert alpha.is_valid_base(ord("T"))
    assert not alpha.is_valid_base(ord("N"))
    with pytest.raises(ValueError):
        alpha.base_pack(b"")