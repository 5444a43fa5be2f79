"""Compressed k-mer representations for DNA and amino acid sequences."""

__version__ = "0.1.0"

__all__ = ["alphabet", "kmer16", "kmer32", "kmeraa", "aasequence"]