"""
pyeudex - Eudex 發音指紋 (Phonetic Fingerprint)

核心概念：
- 每個單字折疊成一個 64-bit 指紋，首字元佔最高位元組
- 發音相近的單字，指紋在加權位元距離下也相近
- 適用於模糊比對、去重與「您是不是要找」查詢

官方入口（穩定 API）：
- `pyeudex.eudex_hash` / `pyeudex.distance` / `pyeudex.similar`
- `pyeudex.EudexMatcher`
"""

# =============================================================================
# 核心 API
# =============================================================================
from pyeudex.core import (
    SIMILARITY_THRESHOLD,
    WEIGHTS,
    distance,
    eudex_hash,
    fingerprints_similar,
    hamming_distance,
    similar,
    string_distance,
    string_hamming_distance,
    to_binary_string,
)

# =============================================================================
# 比對器 (進階用途)
# =============================================================================
from pyeudex.config import EudexConfig
from pyeudex.matcher import EudexMatcher, Match, cached_eudex_hash, clear_hash_cache

# =============================================================================
# 日誌工具
# =============================================================================
from pyeudex.utils.logger import enable_debug_logging, enable_timing_logging, get_logger

__all__ = [
    # Core
    "eudex_hash",
    "distance",
    "hamming_distance",
    "fingerprints_similar",
    "similar",
    "string_distance",
    "string_hamming_distance",
    "to_binary_string",
    "WEIGHTS",
    "SIMILARITY_THRESHOLD",
    # Matcher
    "EudexMatcher",
    "Match",
    "EudexConfig",
    "cached_eudex_hash",
    "clear_hash_cache",
    # Logging
    "get_logger",
    "enable_debug_logging",
    "enable_timing_logging",
]

__version__ = "0.1.0"
