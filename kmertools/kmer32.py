"""A kmer of at most 14 bases, 2-bit encoded, with its length in the upper 4 bits of a 32-bit word."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import BinaryIO

from kmertools.alphabet import Alphabet2b

_MASK32 = 0xFFFFFFFF
_NB_BASE_MASK = 0xF0000000
_VALUE_MASK = 0x0FFFFFFF
_ALPHABET = Alphabet2b()


def _reverse_bits32(value: int) -> int:
    return int(f"{value & _MASK32:032b}"[::-1], 2)


def _check_nb_bases(nb_bases: int) -> None:
    if not 0 <= nb_bases <= 14:
        raise ValueError("Kmer32bit cannot store more than 14 bases")


@dataclass(frozen=True, order=True)
class Kmer32bit:
    """Kmer of up to 14 bases; the number of bases sits in the 4 upper bits.

    Ordering compares the number of bases first, then the packed bases,
    which is lexicographic order for kmers of the same length.
    """

    value: int = 0

    nb_base_max = 14
    bitsize = 32

    def __post_init__(self) -> None:
        if not 0 <= self.value <= _MASK32:
            raise ValueError(f"value {self.value!r} does not fit in 32 bits")

    @classmethod
    def empty(cls, nb_bases: int) -> Kmer32bit:
        """Return an all-A kmer that will hold nb_bases bases."""
        _check_nb_bases(nb_bases)
        return cls(nb_bases << 28)

    def with_nb_base(self, nb_bases: int) -> Kmer32bit:
        """Return a copy with the number of bases field replaced."""
        _check_nb_bases(nb_bases)
        return replace(self, value=(self.value & _VALUE_MASK) | (nb_bases << 28))

    @property
    def nb_base(self) -> int:
        """Number of bases stored in the kmer."""
        return (self.value >> 28) & 0b1111

    def push(self, base: int) -> Kmer32bit:
        """Append a 2-bit encoded base on the right, dropping the leftmost one."""
        value_mask = (1 << (2 * self.nb_base)) - 1
        new_value = ((self.value << 2) & value_mask) | (base & 0b11)
        return Kmer32bit(new_value | (self.value & _NB_BASE_MASK))

    def reverse_complement(self) -> Kmer32bit:
        """Return the reverse complement kmer, keeping the number of bases."""
        nb_bases_field = self.value & _NB_BASE_MASK
        rev = _reverse_bits32(~self.value & _MASK32)
        rev = ((rev & 0x55555555) << 1) | ((rev & 0xAAAAAAAA) >> 1)
        rev >>= 32 - 2 * self.nb_base
        return Kmer32bit((rev & _VALUE_MASK) | nb_bases_field)

    def dump(self, stream: BinaryIO) -> int:
        """Write the raw 32-bit word, little endian; return the bytes written."""
        return stream.write(self.value.to_bytes(4, "little"))

    def uncompressed(self) -> bytes:
        """Return the bases as ASCII bytes."""
        return bytes(
            _ALPHABET.decode((self.value >> shift) & 0b11)
            for shift in range(2 * (self.nb_base - 1), -1, -2)
        )

    def compressed_value(self) -> int:
        """Return the packed bases with the number of bases field cleared."""
        return self.value & _VALUE_MASK

    @classmethod
    def build(cls, val: int, nb_base: int) -> Kmer32bit:
        """Build from packed bases and a number of bases."""
        _check_nb_bases(nb_base)
        return cls((nb_base << 28) | val)

    @classmethod
    def from_str(cls, s: str) -> Kmer32bit:
        """Parse an ACGT string of at most 14 characters."""
        if len(s) > 14:
            raise ValueError("too long kmer")
        kmer = cls.empty(len(s))
        for ch in s:
            if not _ALPHABET.is_valid_base(ch):
                raise ValueError("char not in ACGT")
            kmer = kmer.push(_ALPHABET.encode(ch))
        return kmer

    def __str__(self) -> str:
        return self.uncompressed().decode("ascii")