"""
核心層

音素表、雜湊建構與距離計算，全部為無狀態的純函式。
"""

from .distance import (
    SIMILARITY_THRESHOLD,
    WEIGHTS,
    distance,
    fingerprints_similar,
    hamming_distance,
    similar,
    string_distance,
    string_hamming_distance,
)
from .hashing import MAX_PHONES, eudex_hash, to_binary_string
from .tables import (
    INJECTIVE_PHONES,
    INJECTIVE_PHONES_C1,
    PHONES,
    PHONES_C1,
    CharClass,
    classify,
    injective_phone,
    phone,
)

__all__ = [
    # 音素表
    "PHONES",
    "PHONES_C1",
    "INJECTIVE_PHONES",
    "INJECTIVE_PHONES_C1",
    "CharClass",
    "classify",
    "phone",
    "injective_phone",
    # 雜湊
    "MAX_PHONES",
    "eudex_hash",
    "to_binary_string",
    # 距離
    "WEIGHTS",
    "SIMILARITY_THRESHOLD",
    "distance",
    "hamming_distance",
    "fingerprints_similar",
    "similar",
    "string_distance",
    "string_hamming_distance",
]
