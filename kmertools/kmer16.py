"""A 16-base kmer with 2-bit bases packed into a 32-bit word."""

from __future__ import annotations

from dataclasses import dataclass
from typing import BinaryIO

from kmertools.alphabet import Alphabet2b

_MASK32 = 0xFFFFFFFF
_ALPHABET = Alphabet2b()


def _reverse_bits32(value: int) -> int:
    return int(f"{value & _MASK32:032b}"[::-1], 2)


@dataclass(frozen=True, order=True)
class Kmer16b32bit:
    """Kmer of exactly 16 bases, first base in the two upper bits."""

    value: int = 0

    nb_base_max = 16
    bitsize = 32

    def __post_init__(self) -> None:
        if not 0 <= self.value <= _MASK32:
            raise ValueError(f"value {self.value!r} does not fit in 32 bits")

    @property
    def nb_base(self) -> int:
        """Number of bases: always 16."""
        return 16

    def push(self, base: int) -> Kmer16b32bit:
        """Append a 2-bit encoded base on the right, dropping the leftmost one."""
        return Kmer16b32bit(((self.value << 2) | (base & 0b11)) & _MASK32)

    def reverse_complement(self) -> Kmer16b32bit:
        """Return the reverse complement kmer."""
        rev = _reverse_bits32(~self.value & _MASK32)
        rev = ((rev & 0x55555555) << 1) | ((rev & 0xAAAAAAAA) >> 1)
        return Kmer16b32bit(rev & _MASK32)

    def dump(self, stream: BinaryIO) -> int:
        """Write the raw 32-bit value, little endian; return the bytes written."""
        return stream.write(self.value.to_bytes(4, "little"))

    def uncompressed(self) -> bytes:
        """Return the bases as ASCII bytes."""
        return bytes(
            _ALPHABET.decode((self.value >> shift) & 0b11) for shift in range(30, -1, -2)
        )

    def compressed_value(self) -> int:
        """Return the packed 32-bit value."""
        return self.value

    @classmethod
    def build(cls, val: int, nb_base: int) -> Kmer16b32bit:
        """Build from a packed value; the base count is fixed at 16."""
        return cls(val)

    @classmethod
    def from_str(cls, s: str) -> Kmer16b32bit:
        """Parse a 16-character ACGT string."""
        if len(s) != 16:
            raise ValueError("length of kmer should be 16")
        kmer = cls()
        for ch in s:
            if not _ALPHABET.is_valid_base(ch):
                raise ValueError("char not in ACGT")
            kmer = kmer.push(_ALPHABET.encode(ch))
        return kmer

    def __str__(self) -> str:
        return self.uncompressed().decode("ascii")