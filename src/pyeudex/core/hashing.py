"""
Eudex 雜湊建構

將字串折疊成 64-bit 指紋:
- 最高位元組: 首字元的 injective 音素
- 其餘 7 個位元組: 後續字元的音素 (依序)，不足 7 個時高位補 0

與前一個保留音素在 discriminant 以外的位元相同時，視為重複音而略過，
因此 "riiiindom" 與 "ryyyyyndom" 會得到相同指紋。
"""

from .tables import PHONES, CharClass, classify, injective_phone

MAX_PHONES = 7
FINGERPRINT_BITS = 64
FINGERPRINT_MASK = (1 << FINGERPRINT_BITS) - 1

# 比對重複音時忽略 discriminant 位元
_DEDUP_MASK = 0xFE


def eudex_hash(word: str) -> int:
    """
    計算單字的 Eudex 指紋

    Args:
        word: 任意字串，無發音內容的字元 (數字、標點、空白等) 會被略過；
              重音字元只有在首字元時才查表

    Returns:
        int: 0 <= fingerprint < 2**64，空字串返回 0

    範例:
        >>> eudex_hash("") == 0
        True
        >>> eudex_hash("JAva") == eudex_hash("java")
        True
    """
    if not word:
        return 0

    first = injective_phone(word[0]) or 0

    res = 0
    retained = 0
    for char in word[1:]:
        if retained >= MAX_PHONES:
            break

        # 首字元以外只查 ASCII 字母，重音字元與其他字元一樣略過
        kind, index = classify(char)
        if kind is not CharClass.ASCII:
            continue
        x = PHONES[index]

        # res 的最低位元組即為上一個保留的音素 (初始為 0)
        if (res & _DEDUP_MASK) != (x & _DEDUP_MASK):
            res = (res << 8) | x
            retained += 1

    return res | (first << 56)


def to_binary_string(fingerprint: int) -> str:
    """將指紋格式化為 64 字元的二進位字串 (最高位在前)，僅供除錯顯示"""
    return format(fingerprint & FINGERPRINT_MASK, "064b")
