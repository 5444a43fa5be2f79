"""Amino-acid alphabet and kmers of amino acids packed on 5 bits per residue."""

from __future__ import annotations

from dataclasses import dataclass
from typing import BinaryIO, ClassVar, Union

Residue = Union[int, str]

_BASES = "ACDEFGHIKLMNPQRSTVWY"

# Codes follow lexicographic order starting at 1; 0b01110 is not used.
_ENCODE = {
    ord("A"): 0b00001,
    ord("C"): 0b00010,
    ord("D"): 0b00011,
    ord("E"): 0b00100,
    ord("F"): 0b00101,
    ord("G"): 0b00110,
    ord("H"): 0b00111,
    ord("I"): 0b01000,
    ord("K"): 0b01001,
    ord("L"): 0b01010,
    ord("M"): 0b01011,
    ord("N"): 0b01100,
    ord("P"): 0b01101,
    ord("Q"): 0b01111,
    ord("R"): 0b10000,
    ord("S"): 0b10001,
    ord("T"): 0b10010,
    ord("V"): 0b10011,
    ord("W"): 0b10100,
    ord("Y"): 0b10101,
}
_DECODE = {code: byte for byte, code in _ENCODE.items()}


def _byte(c: Residue) -> int:
    """Return the byte value of a residue given as an int or a one-character string."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return int(c)


class AminoAlphabet:
    """The 20 amino acids, encoded on 5 bits from 1 upwards in lexicographic order."""

    bases = _BASES
    nb_bits = 5

    def __len__(self) -> int:
        return len(self.bases)

    def encode(self, c: Residue) -> int:
        """Encode an amino acid on 5 bits."""
        try:
            return _ENCODE[_byte(c)]
        except KeyError:
            raise ValueError(f"not a code in alphabet for amino acid: {c!r}") from None

    def decode(self, c: int) -> int:
        """Decode a 5-bit pattern into its amino-acid byte."""
        try:
            return _DECODE[c]
        except KeyError:
            raise ValueError(
                f"pattern not a code in alphabet for amino acid: {c & 0b11111:#b}"
            ) from None

    def is_valid_base(self, c: Residue) -> bool:
        """Tell whether a character belongs to the alphabet."""
        return _byte(c) in _ENCODE


_ALPHABET = AminoAlphabet()


def _check(kmer) -> None:
    if not 0 <= kmer.value < (1 << kmer.bitsize):
        raise ValueError(f"value {kmer.value!r} does not fit in {kmer.bitsize} bits")
    if kmer.nb_base < 0:
        raise ValueError("number of bases must not be negative")


def _empty(cls, nb_base: int):
    if not 0 <= nb_base < cls._new_limit:
        raise ValueError(f"For {cls.__name__} nb_base must be less than {cls._new_limit}")
    return cls(nb_base, 0)


def _pushed_value(kmer, c: Residue) -> int:
    value_mask = (1 << (5 * kmer.nb_base)) - 1
    encoded = _ALPHABET.encode(c)
    return ((kmer.value << 5) & value_mask) | (encoded & 0b11111)


def _dump(kmer, stream: BinaryIO) -> int:
    stream.write(bytes((kmer.nb_base & 0xFF,)))
    return stream.write(kmer.value.to_bytes(kmer.bitsize // 8, "little"))


def _uncompressed(kmer) -> bytes:
    return bytes(
        _ALPHABET.decode((kmer.value >> shift) & 0b11111)
        for shift in range(5 * (kmer.nb_base - 1), -1, -5)
    )


@dataclass(frozen=True, order=True)
class KmerAA32bit:
    """Amino-acid kmer packed in a 32-bit word.

    Ordering compares the number of residues first, then the packed value.
    """

    nb_base: int
    value: int = 0

    bitsize: ClassVar[int] = 32
    nb_base_max: ClassVar[int] = 32 // 5
    _new_limit: ClassVar[int] = 32 // 5

    def __post_init__(self) -> None:
        _check(self)

    @classmethod
    def empty(cls, nb_base: int) -> "KmerAA32bit":
        """Return a zeroed kmer that will hold nb_base residues."""
        return _empty(cls, nb_base)

    def push(self, c: Residue) -> "KmerAA32bit":
        """Append an (unencoded) amino acid on the right, dropping the leftmost one."""
        return KmerAA32bit(self.nb_base, _pushed_value(self, c))

    def dump(self, stream: BinaryIO) -> int:
        """Write the residue count as one byte then the packed value, little endian.

        Return the number of bytes written for the packed value.
        """
        return _dump(self, stream)

    def uncompressed(self) -> bytes:
        """Return the residues as ASCII bytes."""
        return _uncompressed(self)

    def compressed_value(self) -> int:
        """Return the packed value."""
        return self.value

    @classmethod
    def build(cls, val: int, nb_base: int) -> "KmerAA32bit":
        """Build a kmer from a packed value and a number of residues."""
        return cls(nb_base, val)

    def __str__(self) -> str:
        return self.uncompressed().decode("ascii")


@dataclass(frozen=True, order=True)
class KmerAA64bit:
    """Amino-acid kmer packed in a 64-bit word.

    Ordering compares the number of residues first, then the packed value.
    """

    nb_base: int
    value: int = 0

    bitsize: ClassVar[int] = 64
    nb_base_max: ClassVar[int] = 12
    _new_limit: ClassVar[int] = 12

    def __post_init__(self) -> None:
        _check(self)

    @classmethod
    def empty(cls, nb_base: int) -> "KmerAA64bit":
        """Return a zeroed kmer that will hold nb_base residues."""
        return _empty(cls, nb_base)

    def push(self, c: Residue) -> "KmerAA64bit":
        """Append an (unencoded) amino acid on the right, dropping the leftmost one."""
        return KmerAA64bit(self.nb_base, _pushed_value(self, c))

    def dump(self, stream: BinaryIO) -> int:
        """Write the residue count as one byte then the packed value, little endian.

        Return the number of bytes written for the packed value.
        """
        return _dump(self, stream)

    def uncompressed(self) -> bytes:
        """Return the residues as ASCII bytes."""
        return _uncompressed(self)

    def compressed_value(self) -> int:
        """Return the packed value."""
        return self.value

    @classmethod
    def build(cls, val: int, nb_base: int) -> "KmerAA64bit":
        """Build a kmer from a packed value and a number of residues."""
        return cls(nb_base, val)

    def __str__(self) -> str:
        return self.uncompressed().decode("ascii")