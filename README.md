# kmertools

Compact k-mer representations for DNA and amino acid sequences.

DNA bases are packed two bits per base (`A=00`, `C=01`, `G=10`, `T=11`), so a
k-mer fits in a single 32-bit word. Amino acids are packed five bits per
residue into 32- or 64-bit words. All k-mer types are frozen dataclasses:
they compare, sort and hash by value, and `push` returns a new k-mer.

## Installation

```
pip install .
```

For running the tests:

```
pip install .[test]
pytest
```

## Modules

- `kmertools.alphabet` — base alphabets: `Alphabet2b` (ACGT on 2 bits),
  `Alphabet4b` (ACGTN on 4 bits, with `Z` as filler), `Alphabet8b`
  (uncompressed), each with `encode`, `decode`, `complement`,
  `is_valid_base` and `base_pack`; the first two also have `base_unpack` and
  `nb_invalid_bases`. Helpers: `is_acgt`, `get_ac_from_tg` and
  `count_non_acgt`. Bases may be given as byte values or one-character
  strings; unknown bases raise `ValueError`.
- `kmertools.kmer16` — `Kmer16b32bit`, a k-mer of exactly 16 bases stored in a
  32-bit word.
- `kmertools.kmer32` — `Kmer32bit`, k-mers of up to 14 bases with the length
  kept in the 4 upper bits of the word. Ordering compares length first, then
  the bases.
- `kmertools.kmeraa` — `AminoAlphabet` (the 20 amino acids on 5 bits),
  `KmerAA32bit` (fewer than 6 residues) and `KmerAA64bit` (fewer than 12
  residues).
- `kmertools.aasequence` — `SequenceAA`, `KmerSeqIterator` and `KmerGenerator`
  to produce amino acid k-mers along a sequence,
  `hashmap_count_to_vec_count` to turn a k-mer distribution into a list of
  pairs, and `nbkmer_guess` / `nbkmer_guess_seqs`, heuristic bounds on the
  number of distinct k-mers.

The DNA k-mers have `push`, `reverse_complement`, `uncompressed`,
`compressed_value`, `build`, `from_str` and `dump` (writes the raw word, little
endian, to a binary stream). The amino acid k-mers have `empty`, `push`,
`uncompressed`, `compressed_value`, `build` and `dump` (one byte for the
length, then the word).

## Examples

DNA k-mers and their reverse complements:

```python
from kmertools.kmer32 import Kmer32bit

kmer = Kmer32bit.from_str("TACGAGTAGGAT")
rc = kmer.reverse_complement()
print(rc.uncompressed().decode())   # ATCCTACTCGTA
print(rc)                           # ATCCTACTCGTA
```

Amino acid k-mers along a protein sequence:

```python
from kmertools.aasequence import KmerSeqIterator, SequenceAA
from kmertools.kmeraa import KmerAA64bit

seq = SequenceAA.from_str("MTEQIELIKLYSTRIL")
kmers = KmerSeqIterator(KmerAA64bit, 4, seq)
kmers.set_range(3, 10)
print([str(k) for k in kmers])
# ['QIEL', 'IELI', 'ELIK', 'LIKL']
```

Counting k-mers:

```python
from kmertools.aasequence import KmerGenerator, hashmap_count_to_vec_count

gen = KmerGenerator(KmerAA64bit, 3)
counts = gen.generate_weighted_kmer(seq)      # collections.Counter
pairs = hashmap_count_to_vec_count(counts)    # [(kmer, count), ...]
```

`SequenceAA` rejects characters outside the amino acid alphabet with
`ValueError`; `SequenceAA.new_filtered` drops them instead.

## What this package does not do

It is a library only and installs no command. It does not read FASTA/FASTQ
files, compute sketches (MinHash, HyperLogLog and the like), compute ntHash
values, store k-mers in a database, or provide k-mers wider than 32 bits for
DNA. Reverse complement is not defined for amino acid k-mers.