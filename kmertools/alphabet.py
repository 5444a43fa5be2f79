"""Encoding of DNA bases on 2, 4 or 8 bits, with packing helpers."""

from __future__ import annotations

from typing import Iterable, Union

Base = Union[int, str]

_ACGT = frozenset(b"ACGT")


def _byte(c: Base) -> int:
    """Return the byte value of a base given as an int or a one-character string."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return int(c)


def is_acgt(c: Base) -> bool:
    """Tell whether a base is one of A, C, G, T."""
    return _byte(c) in _ACGT


def get_ac_from_tg(c: Base) -> int:
    """Map T to A and G to C; any other base is returned unchanged."""
    b = _byte(c)
    return {ord("T"): ord("A"), ord("G"): ord("C")}.get(b, b)


def count_non_acgt(seq: Iterable[Base]) -> int:
    """Count the bases of a sequence that are not A, C, G or T."""
    return sum(1 for b in seq if not is_acgt(b))


class Alphabet2b:
    """Two-bit encoding of ACGT: A=0b00, C=0b01, G=0b10, T=0b11.

    Lexicographic order is preserved and complementary bases are bitwise
    complements of each other.
    """

    bases = "ACGT"
    nb_bits = 2

    _ENCODE = {ord("A"): 0b00, ord("C"): 0b01, ord("G"): 0b10, ord("T"): 0b11}
    _DECODE = {v: k for k, v in _ENCODE.items()}

    def encode(self, c: Base) -> int:
        """Encode a base on 2 bits."""
        try:
            return self._ENCODE[_byte(c)]
        except KeyError:
            raise ValueError(f"base {c!r} not in 2-bit alphabet") from None

    def decode(self, c: int) -> int:
        """Decode a 2-bit pattern into its base byte."""
        try:
            return self._DECODE[c]
        except KeyError:
            raise ValueError(f"pattern {c!r} not a code in 2-bit alphabet") from None

    def complement(self, c: int) -> int:
        """Complement an encoded base."""
        if c not in self._DECODE:
            raise ValueError(f"pattern {c!r} not a code in 2-bit alphabet")
        return 0b11 - c

    def is_valid_base(self, c: Base) -> bool:
        """Tell whether a base can be encoded."""
        return _byte(c) in _ACGT

    def base_pack(self, to_pack: Iterable[Base]) -> int:
        """Pack the first four bases into one byte, first base in the upper bits."""
        bases = list(to_pack)[:4]
        if len(bases) < 4:
            raise ValueError("base_pack needs at least 4 bases")
        packed = 0
        for shift, base in zip((6, 4, 2, 0), bases):
            packed |= self.encode(base) << shift
        return packed

    def base_unpack(self, packed: int) -> bytes:
        """Unpack a byte into its four decoded bases."""
        return bytes(self.decode((packed >> shift) & 0b11) for shift in (6, 4, 2, 0))

    def nb_invalid_bases(self, seq: Iterable[Base]) -> int:
        """Count bases of a sequence that this alphabet cannot encode."""
        return sum(1 for b in seq if not self.is_valid_base(b))


class Alphabet4b:
    """Four-bit encoding of ACGTN: A=0b0001, C=0b0010, G=0b0100, T=0b1000, N=0b1111.

    The filler base Z encodes to 0 and any unknown pattern decodes to Z.
    """

    bases = "ACGTN"
    nb_bits = 4

    _ENCODE = {
        ord("A"): 0b0001,
        ord("C"): 0b0010,
        ord("G"): 0b0100,
        ord("T"): 0b1000,
        ord("N"): 0b1111,
        ord("Z"): 0b0000,
    }
    _DECODE = {v: k for k, v in _ENCODE.items() if k != ord("Z")}
    _COMPLEMENT = {
        0b0001: 0b1000,
        0b0010: 0b0100,
        0b0100: 0b0010,
        0b1000: 0b0001,
        0b1111: 0b1111,
    }
    _VALID = frozenset(b"ACGTN")

    def encode(self, c: Base) -> int:
        """Encode a base on 4 bits."""
        try:
            return self._ENCODE[_byte(c)]
        except KeyError:
            raise ValueError(f"base {c!r} not in 4-bit alphabet") from None

    def decode(self, c: int) -> int:
        """Decode a 4-bit pattern; unknown patterns decode to Z."""
        return self._DECODE.get(c, ord("Z"))

    def complement(self, c: int) -> int:
        """Complement an encoded base."""
        try:
            return self._COMPLEMENT[c]
        except KeyError:
            raise ValueError(f"pattern {c!r} not a code in 4-bit alphabet") from None

    def is_valid_base(self, c: Base) -> bool:
        """Tell whether a base is one of A, C, G, T, N."""
        return _byte(c) in self._VALID

    def base_pack(self, to_pack: Iterable[Base]) -> int:
        """Pack the first two bases into one byte, first base in the upper nibble."""
        bases = list(to_pack)[:2]
        if len(bases) < 2:
            raise ValueError("base_pack needs at least 2 bases")
        return (self.encode(bases[0]) << 4) | self.encode(bases[1])

    def base_unpack(self, packed: int) -> bytes:
        """Unpack a byte into its two decoded bases."""
        return bytes((self.decode((packed >> 4) & 0x0F), self.decode(packed & 0x0F)))

    def nb_invalid_bases(self, seq: Iterable[Base]) -> int:
        """Count bases of a sequence that this alphabet cannot encode."""
        return sum(1 for b in seq if not self.is_valid_base(b))


class Alphabet8b:
    """Uncompressed representation: a base is its own byte."""

    bases = "ACGT"
    nb_bits = 8

    _COMPLEMENT = {ord("A"): ord("T"), ord("C"): ord("G"), ord("G"): ord("C"), ord("T"): ord("A")}

    def encode(self, c: Base) -> int:
        """Return the byte of the base."""
        return _byte(c)

    def decode(self, c: Base) -> int:
        """Return the byte of the base, as stored."""
        return _byte(c)

    def complement(self, c: Base) -> int:
        """Complement an ACGT base byte."""
        try:
            return self._COMPLEMENT[_byte(c)]
        except KeyError:
            raise ValueError(f"base {c!r} not in ACGT") from None

    def is_valid_base(self, c: Base) -> bool:
        """Tell whether a base is one of A, C, G, T."""
        return _byte(c) in _ACGT

    def base_pack(self, to_pack: Iterable[Base]) -> int:
        """Return the first base byte."""
        for base in to_pack:
            return _byte(base)
        raise ValueError("base_pack needs at least 1 base")