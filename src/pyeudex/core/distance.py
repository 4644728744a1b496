"""
指紋距離

加權距離: 兩指紋 XOR 後逐位元組計算 1 的個數，再乘上位元組權重
(由低到高 1, 2, 3, 5, 8, 13, 21, 34)，首字元所在的最高位元組影響最大。

Hamming 距離: XOR 後整體 1 的個數，不加權。
"""

from typing import Tuple

from .hashing import FINGERPRINT_MASK, eudex_hash

# 位元組 0 (最低) 到位元組 7 (最高) 的權重
WEIGHTS: Tuple[int, ...] = (1, 2, 3, 5, 8, 13, 21, 34)

# 加權距離小於此值視為發音相似
SIMILARITY_THRESHOLD = 15


def _xor(a: int, b: int) -> int:
    return (a ^ b) & FINGERPRINT_MASK


def distance(a: int, b: int) -> int:
    """兩指紋的加權距離，distance(a, b) == distance(b, a)"""
    d = _xor(a, b)
    total = 0
    for weight in WEIGHTS:
        total += (d & 0xFF).bit_count() * weight
        d >>= 8
    return total


def hamming_distance(a: int, b: int) -> int:
    """兩指紋的 Hamming 距離"""
    return _xor(a, b).bit_count()


def fingerprints_similar(a: int, b: int) -> bool:
    return distance(a, b) < SIMILARITY_THRESHOLD


def similar(a: str, b: str) -> bool:
    """
    兩個單字的發音是否相似

    範例:
        >>> similar("java", "jiva")
        True
        >>> similar("no", "go")
        False
    """
    return fingerprints_similar(eudex_hash(a), eudex_hash(b))


def string_distance(a: str, b: str) -> int:
    """兩個單字的加權距離"""
    return distance(eudex_hash(a), eudex_hash(b))


def string_hamming_distance(a: str, b: str) -> int:
    """兩個單字的 Hamming 距離"""
    return hamming_distance(eudex_hash(a), eudex_hash(b))
