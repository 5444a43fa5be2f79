"""Amino-acid sequences and kmer generation along them."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import Generic, Iterable, Iterator, Sequence, TypeVar, Union

from kmertools.kmeraa import AminoAlphabet, KmerAA32bit, KmerAA64bit

KmerAA = TypeVar("KmerAA", KmerAA32bit, KmerAA64bit)

_ALPHABET = AminoAlphabet()
_NB_BITS = 5


def _as_bytes(data: Union[str, bytes, bytearray, Iterable[int]]) -> bytes:
    if isinstance(data, str):
        return data.encode("ascii")
    return bytes(data)


@dataclass(frozen=True)
class SequenceAA:
    """A sequence of amino acids, one ASCII byte per residue."""

    seq: bytes

    def __post_init__(self) -> None:
        seq = _as_bytes(self.seq)
        object.__setattr__(self, "seq", seq)
        for c in seq:
            if not _ALPHABET.is_valid_base(c):
                raise ValueError(f"character not in alphabet: {c!r}")

    @classmethod
    def from_str(cls, s: str) -> SequenceAA:
        """Build a sequence from a string of amino acids."""
        return cls(s.encode("ascii"))

    @classmethod
    def new_filtered(
        cls, buf: Union[str, bytes, Iterable[int]], alphabet: AminoAlphabet | None = None
    ) -> SequenceAA:
        """Build a sequence keeping only the residues that belong to the alphabet."""
        alphabet = alphabet if alphabet is not None else _ALPHABET
        return cls(bytes(b for b in _as_bytes(buf) if alphabet.is_valid_base(b)))

    def __len__(self) -> int:
        return len(self.seq)

    @property
    def size(self) -> int:
        """Uncompressed length of the sequence."""
        return len(self.seq)

    def get_base(self, pos: int) -> int:
        """Return the residue byte at a position."""
        if not 0 <= pos < len(self.seq):
            raise IndexError(f"base position {pos} after end of sequence")
        return self.seq[pos]

    def __str__(self) -> str:
        return self.seq.decode("ascii")


class KmerSeqIterator(Generic[KmerAA]):
    """Iterate over the kmers of a sequence, optionally restricted to a range."""

    def __init__(self, kmer_type: type[KmerAA], kmer_size: int, seq: SequenceAA) -> None:
        self.kmer_type = kmer_type
        self.nb_base = kmer_size
        self.sequence = seq
        self._range = range(0, len(seq))
        self._position = 0
        self._previous: KmerAA | None = None

    def set_range(self, first: int, last: int) -> None:
        """Restrict generation to bases in first..last, last excluded."""
        if last <= first or last > len(self.sequence):
            raise ValueError(
                f"bad range for iterator: first {first}, last {last}, "
                f"length {len(self.sequence)}"
            )
        self._range = range(first, last)
        self._position = first

    def __iter__(self) -> Iterator[KmerAA]:
        return self

    def __next__(self) -> KmerAA:
        if self._position >= min(len(self.sequence), self._range.stop):
            raise StopIteration
        if len(self.sequence) < self.nb_base:
            raise StopIteration
        if self._previous is not None:
            base = self.sequence.get_base(self._position)
            self._previous = self._previous.push(base)
            self._position += 1
            return self._previous
        value = 0
        for shift in range(_NB_BITS * (self.nb_base - 1), -1, -_NB_BITS):
            base = self.sequence.get_base(self._position)
            value |= _ALPHABET.encode(base) << shift
            self._position += 1
        self._previous = self.kmer_type.build(value, self.nb_base)
        return self._previous


class KmerGenerator(Generic[KmerAA]):
    """Generate the kmers of a given size and type along amino-acid sequences."""

    def __init__(self, kmer_type: type[KmerAA], kmer_size: int) -> None:
        if kmer_size > kmer_type.nb_base_max:
            raise ValueError(
                f"{kmer_type.__name__} cannot have size greater than {kmer_type.nb_base_max}"
            )
        self.kmer_type = kmer_type
        self.kmer_size = kmer_size

    def _iterator(self, seq: SequenceAA) -> KmerSeqIterator[KmerAA]:
        return KmerSeqIterator(self.kmer_type, self.kmer_size, seq)

    def generate_kmer(self, seq: SequenceAA) -> list[KmerAA]:
        """Return all kmers of the sequence in order."""
        return list(self._iterator(seq))

    def generate_kmer_in_range(self, seq: SequenceAA, begin: int, end: int) -> list[KmerAA]:
        """Return all kmers whose bases lie in begin..end, end excluded."""
        if begin >= end:
            raise ValueError("bad range for kmer iteration")
        kmers = self._iterator(seq)
        kmers.set_range(begin, end)
        return list(kmers)

    def generate_weighted_kmer(self, seq: SequenceAA) -> Counter:
        """Return each kmer of the sequence with its multiplicity."""
        return Counter(self._iterator(seq))


def hashmap_count_to_vec_count(kmer_distribution: dict) -> list[tuple]:
    """Turn a kmer-to-count mapping into a list of (kmer, count) pairs."""
    return list(kmer_distribution.items())


def _guess(nb_bases: int) -> int:
    if nb_bases <= 0:
        raise ValueError("cannot guess number of kmers of an empty sequence")
    return min(nb_bases, 10_000_000 * (1 + nb_bases.bit_length() - 1))


def nbkmer_guess(seq: SequenceAA) -> int:
    """Heuristic upper bound on the number of distinct kmers of a sequence."""
    return _guess(len(seq))


def nbkmer_guess_seqs(seqs: Sequence[SequenceAA]) -> int:
    """Heuristic upper bound on the number of distinct kmers of several sequences."""
    return _guess(sum(len(s) for s in seqs))