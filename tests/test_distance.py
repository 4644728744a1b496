"""
距離與相似判斷測試
"""
import pytest

from pyeudex import (
    SIMILARITY_THRESHOLD,
    WEIGHTS,
    distance,
    eudex_hash,
    fingerprints_similar,
    hamming_distance,
    similar,
    string_distance,
    string_hamming_distance,
)

ALL_ONES = (1 << 64) - 1


class TestWeightedDistance:
    """加權距離"""

    def test_weights(self):
        assert WEIGHTS == (1, 2, 3, 5, 8, 13, 21, 34)
        assert SIMILARITY_THRESHOLD == 15

    def test_identity(self):
        assert distance(0, 0) == 0
        assert distance(ALL_ONES, ALL_ONES) == 0
        for word in ["", "java", "Jeff Buckley", "möier"]:
            assert distance(eudex_hash(word), eudex_hash(word)) == 0

    @pytest.mark.parametrize(
        "fingerprint, expected",
        [
            (0x01, 1),
            (0x0100, 2),
            (0x03 << 16, 6),
            (1 << 56, 34),
            (0xFF << 56, 272),
            (0x0101010101010101, 87),
            (ALL_ONES, 696),
        ],
    )
    def test_per_byte_weights(self, fingerprint, expected):
        """由最低位元組到最高位元組依序乘上 1, 2, 3, 5, 8, 13, 21, 34"""
        assert distance(fingerprint, 0) == expected
        assert distance(0, fingerprint) == expected

    def test_first_letter_dominates(self):
        """n 與 g 的 injective 值差 3 個位元，全部落在最高位元組"""
        assert string_distance("no", "go") == 3 * 34

    def test_documented_distances(self):
        assert string_distance("lizzard", "wizzard") == 68
        assert string_distance("rick", "rolled") == 12
        assert string_distance("trump", "drumpf") == 85
        assert string_distance("jumpo", "jumbo") == 2

    def test_ordering(self):
        assert string_distance("lizzard", "wizzard") > string_distance("rick", "rolled")
        assert string_distance("bannana", "panana") >= string_distance("apple", "abple")
        assert string_distance("trump", "drumpf") < string_distance("gangam", "style")

    @pytest.mark.parametrize(
        "a, b",
        [("a", "b"), ("youtube", "facebook"), ("Rust", "Go"), ("rick", "rolled")],
    )
    def test_symmetry(self, a, b):
        assert string_distance(a, b) == string_distance(b, a)
        assert string_hamming_distance(a, b) == string_hamming_distance(b, a)


class TestHammingDistance:
    """Hamming 距離"""

    def test_bit_count(self):
        assert hamming_distance(0, 0) == 0
        assert hamming_distance(ALL_ONES, 0) == 64
        assert hamming_distance(0xF0, 0x0F) == 8
        assert hamming_distance(1 << 63, 1) == 2

    def test_words(self):
        assert string_hamming_distance("crack", "crakk") < 10
        assert string_hamming_distance("schmid", "schmidt") < 14
        assert string_hamming_distance("no", "go") == 3


class TestSimilar:
    """相似判斷 (加權距離 < 15)"""

    @pytest.mark.parametrize(
        "a, b",
        [
            ("yay", "yuy"),
            ("what", "wat"),
            ("jesus", "jeuses"),
            ("", ""),
            ("jumpo", "jumbo"),
            ("lol", "lulz"),
            ("goth", "god"),
            ("maier", "meyer"),
            ("java", "jiva"),
            ("möier", "meyer"),
            ("fümlaut", "fymlaut"),
            ("Jonny", "Johnny"),
        ],
    )
    def test_similar(self, a, b):
        assert similar(a, b)
        assert similar(b, a)

    @pytest.mark.parametrize(
        "a, b",
        [
            ("youtube", "reddit"),
            ("yet", "vet"),
            ("hacker", "4chan"),
            ("awesome", "me"),
            ("prisco", "vkisco"),
            ("no", "go"),
            ("horse", "norse"),
            ("nice", "mice"),
        ],
    )
    def test_not_similar(self, a, b):
        assert not similar(a, b)

    def test_threshold_is_strict(self):
        assert fingerprints_similar(0x0E << 8 | 0x03, 0)  # 3 * 2 + 2 = 8
        assert fingerprints_similar(0b111 << 16 | 0b11111, 0)  # 9 + 5 = 14
        assert not fingerprints_similar(0b111 << 24, 0)  # 15
