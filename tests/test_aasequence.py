import pytest

from kmertools.aasequence import (
    KmerGenerator,
    KmerSeqIterator,
    SequenceAA,
    hashmap_count_to_vec_count,
    nbkmer_guess,
    nbkmer_guess_seqs,
)
from kmertools.kmeraa import AminoAlphabet, KmerAA32bit, KmerAA64bit

LONG = (
    "MTEQIELIKLYSTRILALAAQMPHVGSLDNPDASAMKRSPLCGSKVTVDVIMQNGKITEFAQNVKACALGQAAASVAAQ"
    "NIIGRTAEEVVRARDELAAMLKSGGPPPGPPFDGFEVLAPASEYKNRHASILLSLDATAEACASIAAQNSA"
)
SHORT = "MTEQIELIKLYSTRILALAAQMPHVGSLDNPD"


@pytest.mark.parametrize("kmer_type", [KmerAA32bit, KmerAA64bit])
def test_iterator_range(kmer_type):
    seq = SequenceAA.from_str(LONG)
    it = KmerSeqIterator(kmer_type, 4, seq)
    it.set_range(3, 10)
    got = [str(k) for k in it]
    assert got == ["QIEL", "IELI", "ELIK", "LIKL"]
    with pytest.raises(StopIteration):
        next(it)


def test_iterator_end():
    seq = SequenceAA.from_str(SHORT)
    kmers = [str(k) for k in KmerSeqIterator(KmerAA64bit, 8, seq)]
    assert kmers[-1] == "VGSLDNPD"
    assert kmers[0] == "MTEQIELI"
    assert len(kmers) == len(SHORT) - 8 + 1


def test_str_conversion():
    assert str(SequenceAA.from_str(SHORT)) == SHORT


def test_invalid_character_rejected():
    with pytest.raises(ValueError):
        SequenceAA.from_str("MTEXB")


def test_new_filtered():
    seq = SequenceAA.new_filtered(b"AXCBD", AminoAlphabet())
    assert str(seq) == "ACD"


def test_get_base_out_of_range():
    seq = SequenceAA.from_str("ACD")
    assert seq.get_base(1) == ord("C")
    with pytest.raises(IndexError):
        seq.get_base(3)


@pytest.mark.parametrize("first,last", [(5, 5), (6, 4), (0, 100)])
def test_set_range_errors(first, last):
    it = KmerSeqIterator(KmerAA64bit, 4, SequenceAA.from_str(SHORT))
    with pytest.raises(ValueError):
        it.set_range(first, last)


def test_short_sequence_yields_nothing():
    gen = KmerGenerator(KmerAA64bit, 5)
    assert gen.generate_kmer(SequenceAA.from_str("ACD")) == []


def test_generate_kmer_count():
    gen = KmerGenerator(KmerAA32bit, 5)
    kmers = gen.generate_kmer(SequenceAA.from_str(LONG))
    assert len(kmers) == len(LONG) - 5 + 1
    assert str(kmers[0]) == "MTEQI"


def test_generate_kmer_in_range():
    gen = KmerGenerator(KmerAA64bit, 4)
    kmers = gen.generate_kmer_in_range(SequenceAA.from_str(LONG), 3, 10)
    assert [str(k) for k in kmers] == ["QIEL", "IELI", "ELIK", "LIKL"]
    with pytest.raises(ValueError):
        gen.generate_kmer_in_range(SequenceAA.from_str(LONG), 10, 3)


def test_generator_size_limit():
    with pytest.raises(ValueError):
        KmerGenerator(KmerAA64bit, 13)


def test_weighted_kmer_and_vec_count():
    gen = KmerGenerator(KmerAA64bit, 2)
    dist = gen.generate_weighted_kmer(SequenceAA.from_str("AAAAC"))
    aa = KmerAA64bit.build(0b00001_00001, 2)
    ac = KmerAA64bit.build(0b00001_00010, 2)
    assert dist == {aa: 3, ac: 1}
    assert sorted(hashmap_count_to_vec_count(dist), key=lambda p: p[1]) == [(ac, 1), (aa, 3)]


def test_nbkmer_guess():
    seq = SequenceAA.from_str(SHORT)
    assert nbkmer_guess(seq) == 32
    assert nbkmer_guess_seqs([seq, seq]) == 64
    with pytest.raises(ValueError):
        nbkmer_guess(SequenceAA.from_str(""))