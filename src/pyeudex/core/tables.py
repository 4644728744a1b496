"""
音素表 (Phone Tables)

每個支援的字元對應一個 8-bit 音素描述值。表內數值皆為經驗調校結果，
修改任何一個值都會讓既有的雜湊值失效。

一般音素表的位元定義:

| 位元 | 值  | 屬性         | 音素                     |
|------|----:|--------------|:------------------------:|
| 0    | 1   | Discriminant | (標記重複音用)           |
| 1    | 2   | Nasal        | mn                       |
| 2    | 4   | Fricative    | fvsjxzhct                |
| 3    | 8   | Plosive      | pbtdcgqk                 |
| 4    | 16  | Dental       | tdnzs                    |
| 5    | 32  | Liquid       | lr                       |
| 6    | 64  | Labial       | bfpv                     |
| 7    | 128 | Confident    | lrxzq (不易拼錯)         |

母音只用 0 與 1 表示 (開口/閉口)，讓母音之間的 XOR 距離最小。

Injective 音素表只用於單字的第一個字元，位元定義:

| 位元 | 值  | 母音              | 子音                         |
|------|----:|-------------------|------------------------------|
| 0    | 1   | Discriminant      | 一般表的位元 1 或 discriminant |
| 1    | 2   | Open-mid?         | 一般表的位元 2               |
| 2    | 4   | Central?          | 一般表的位元 3               |
| 3    | 8   | Close-mid?        | 一般表的位元 4               |
| 4    | 16  | Front?            | 一般表的位元 5               |
| 5    | 32  | Close?            | 一般表的位元 6               |
| 6    | 64  | 比 [ɜ] 更閉口     | 一般表的位元 7               |
| 7    | 128 | 是否為母音                                       |
"""

from enum import Enum
from typing import Optional, Tuple

LETTERS = 26

# Latin-1 重音字元區段 [ß, ÿ)
ACCENTED_START = 0xDF
ACCENTED_END = 0xFF

# ÷ 在重音表中的固定標記值
UNKNOWN_PHONE = 255

_UPPER_ACCENTED_START = 0xC0
_UPPER_ACCENTED_END = 0xDE
_MULTIPLICATION_SIGN = 0xD7


_PHONES = [
    0,  # a
    #  +--------- Confident
    #  |+-------- Labial
    #  ||+------- Liquid
    #  |||+------ Dental
    #  ||||+----- Plosive
    #  |||||+---- Fricative
    #  ||||||+--- Nasal
    #  |||||||+-- Discriminant
    #  ||||||||
    0b01001000,  # b
    0b00001100,  # c
    0b00011000,  # d
    0,           # e
    0b01000100,  # f
    0b00001000,  # g
    0b00000100,  # h
    1,           # i
    0b00000101,  # j
    0b00001001,  # k
    0b10100000,  # l
    0b00000010,  # m
    0b00010010,  # n
    0,           # o
    0b01001001,  # p
    0b10101000,  # q
    0b10100001,  # r
    0b00010100,  # s
    0b00011101,  # t
    1,           # u
    0b01000101,  # v
    0b00000000,  # w
    0b10000100,  # x
    1,           # y
    0b10010100,  # z
]

# 重音字元皆為近似音，各語言差異很大
_PHONES_C1 = [
    _PHONES[ord("s") - ord("a")] ^ 1,  # ß
    0,           # à
    0,           # á
    0,           # â
    0,           # ã
    0,           # ä [æ]
    1,           # å [oː]
    0,           # æ [æ]
    _PHONES[ord("z") - ord("a")] ^ 1,  # ç [t͡ʃ]
    1,           # è
    1,           # é
    1,           # ê
    1,           # ë
    1,           # ì
    1,           # í
    1,           # î
    1,           # ï
    0b00010101,  # ð [ð̠] (無爆破的 t)
    0b00010111,  # ñ [nj] (n 與 j 的組合)
    0,           # ò
    0,           # ó
    0,           # ô
    0,           # õ
    1,           # ö [ø]
    UNKNOWN_PHONE,  # ÷
    1,           # ø [ø]
    1,           # ù
    1,           # ú
    1,           # û
    1,           # ü
    1,           # ý
    0b00010101,  # þ [ð̠] (無爆破的 t)
    1,           # ÿ
]

_INJECTIVE_PHONES = [
    #  +--------- Vowel
    #  |+-------- Closer than ɜ
    #  ||+------- Close
    #  |||+------ Front
    #  ||||+----- Close-mid
    #  |||||+---- Central
    #  ||||||+--- Open-mid
    #  |||||||+-- Discriminant
    #  ||||||||   (*=母音)
    0b10000100,  # a*
    0b00100100,  # b
    0b00000110,  # c
    0b00001100,  # d
    0b11011000,  # e*
    0b00100010,  # f
    0b00000100,  # g
    0b00000010,  # h
    0b11111000,  # i*
    0b00000011,  # j
    0b00000101,  # k
    0b01010000,  # l
    0b00000001,  # m
    0b00001001,  # n
    0b10010100,  # o*
    0b00100101,  # p
    0b01010100,  # q
    0b01010001,  # r
    0b00001010,  # s
    0b00001110,  # t
    0b11100000,  # u*
    0b00100011,  # v
    0b00000000,  # w
    0b01000010,  # x
    0b11100100,  # y*
    0b01001010,  # z
]


def _injective(letter: str) -> int:
    return _INJECTIVE_PHONES[ord(letter) - ord("a")] ^ 1


_INJECTIVE_PHONES_C1 = [
    _injective("s"),  # ß
    _injective("a"),  # à
    _injective("a"),  # á
    #  +--------- Vowel
    #  |+-------- Closer than ɜ
    #  ||+------- Close
    #  |||+------ Front
    #  ||||+----- Close-mid
    #  |||||+---- Central
    #  ||||||+--- Open-mid
    #  |||||||+-- Discriminant
    #  ||||||||
    0b10000000,  # â
    0b10000110,  # ã
    0b10100110,  # ä [æ]
    0b11000010,  # å [oː]
    0b10100111,  # æ [æ]
    0b01010100,  # ç [t͡ʃ]
    _injective("e"),  # è
    _injective("e"),  # é
    _injective("e"),  # ê
    0b11000110,  # ë [ə] or [œ]
    _injective("i"),  # ì
    _injective("i"),  # í
    _injective("i"),  # î
    _injective("i"),  # ï
    0b00001011,  # ð [ð̠] (無爆破的 t)
    0b00001011,  # ñ [nj] (n 與 j 的組合)
    _injective("o"),  # ò
    _injective("o"),  # ó
    _injective("o"),  # ô
    _injective("o"),  # õ
    0b11011100,  # ö [œ] or [ø]
    UNKNOWN_PHONE,  # ÷
    0b11011101,  # ø [œ] or [ø]
    _injective("u"),  # ù
    _injective("u"),  # ú
    _injective("u"),  # û
    _injective("y"),  # ü
    _injective("y"),  # ý
    0b00001011,  # þ [ð̠] (無爆破的 t)
    _injective("y"),  # ÿ
]

# 對外只暴露不可變的 bytes
PHONES = bytes(_PHONES)
PHONES_C1 = bytes(_PHONES_C1)
INJECTIVE_PHONES = bytes(_INJECTIVE_PHONES)
INJECTIVE_PHONES_C1 = bytes(_INJECTIVE_PHONES_C1)


class CharClass(Enum):
    """字元分類"""
    ASCII = "ascii"          # a-z
    ACCENTED = "accented"    # Latin-1 ß..þ
    UNMAPPED = "unmapped"    # 其他字元，不產生音素


def fold_case(code: int) -> int:
    """
    將大寫字母轉為小寫 (ASCII 與 Latin-1 À-Þ)，其他碼位原樣返回

    × (0xD7) 不是字母，不轉換。
    """
    if ord("A") <= code <= ord("Z"):
        return code + 32
    if _UPPER_ACCENTED_START <= code <= _UPPER_ACCENTED_END and code != _MULTIPLICATION_SIGN:
        return code + 32
    return code


def classify(char: str) -> Tuple[CharClass, int]:
    """
    將單一字元分類並計算其在對應音素表中的索引

    Returns:
        (CharClass, index)；UNMAPPED 時 index 為 -1
    """
    code = fold_case(ord(char))
    if 0 <= code - ord("a") < LETTERS:
        return CharClass.ASCII, code - ord("a")
    if ACCENTED_START <= code < ACCENTED_END:
        return CharClass.ACCENTED, code - ACCENTED_START
    return CharClass.UNMAPPED, -1


def phone(char: str) -> Optional[int]:
    """返回字元的一般音素值，無發音內容時返回 None"""
    kind, index = classify(char)
    if kind is CharClass.ASCII:
        return PHONES[index]
    if kind is CharClass.ACCENTED:
        return PHONES_C1[index]
    return None


def injective_phone(char: str) -> Optional[int]:
    """返回字元的 injective 音素值 (僅用於首字元)，無發音內容時返回 None"""
    kind, index = classify(char)
    if kind is CharClass.ASCII:
        return INJECTIVE_PHONES[index]
    if kind is CharClass.ACCENTED:
        return INJECTIVE_PHONES_C1[index]
    return None
