"""
發音比對器 (EudexMatcher)

以 Eudex 加權距離對呼叫端提供的候選詞排序，用於「您是不是要找」與去重。
比對器不持有字典，候選詞每次呼叫時傳入。

排序規則:
1. 加權距離 (越小越前)
2. 小寫拼字的 Levenshtein 編輯距離
3. 候選詞的輸入順序
"""

from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional, Tuple

import Levenshtein

from .config import EudexConfig
from .core.distance import SIMILARITY_THRESHOLD, distance
from .core.hashing import eudex_hash
from .utils.cache import cached_function
from .utils.logger import TimingContext, get_logger


# =============================================================================
# 指紋快取
# =============================================================================

@cached_function(maxsize=50000)
def cached_eudex_hash(word: str) -> int:
    """快取版 eudex_hash"""
    return eudex_hash(word)


def clear_hash_cache() -> None:
    """清除指紋快取"""
    cached_eudex_hash.cache_clear()


def get_hash_cache_info():
    """取得指紋快取的 lru_cache 統計"""
    return cached_eudex_hash.cache_info()


# =============================================================================
# 比對器
# =============================================================================

@dataclass(frozen=True)
class Match:
    """
    比對結果

    Attributes:
        candidate: 候選詞原文
        fingerprint: 候選詞的指紋
        distance: 與查詢詞的加權距離
        edit_distance: 與查詢詞 (皆轉小寫) 的 Levenshtein 距離
    """
    candidate: str
    fingerprint: int
    distance: int
    edit_distance: int


class EudexMatcher:
    """
    發音比對器

    可傳入 EudexConfig，或以關鍵字參數 verbose / on_timing / max_distance 建立配置；
    兩者同時指定時拋出 ValueError。

    使用範例:
        >>> matcher = EudexMatcher()
        >>> matcher.best_match("jonny", ["Tony", "Johnny"]).candidate
        'Johnny'
    """

    def __init__(
        self,
        config: Optional[EudexConfig] = None,
        *,
        verbose: bool = False,
        on_timing: Optional[Callable[[str, float], None]] = None,
        max_distance: Optional[int] = None,
    ):
        if config is None:
            config = EudexConfig(verbose=verbose, on_timing=on_timing, max_distance=max_distance)
        elif verbose or on_timing is not None or max_distance is not None:
            raise ValueError("pass either config or verbose/on_timing/max_distance, not both")
        self._config = config
        self._logger = get_logger("matcher")
        self._hash = cached_eudex_hash if self._config.use_cache else eudex_hash

    @property
    def config(self) -> EudexConfig:
        return self._config

    def _log_timing(self, operation: str) -> TimingContext:
        return TimingContext(operation=operation, callback=self._config.on_timing)

    def _accepts(self, dist: int) -> bool:
        if self._config.max_distance is None:
            return dist < SIMILARITY_THRESHOLD
        return dist <= self._config.max_distance

    def fingerprint(self, word: str) -> int:
        return self._hash(word)

    def is_similar(self, a: str, b: str) -> bool:
        fa = self.fingerprint(a)
        fb = self.fingerprint(b)
        return self._accepts(distance(fa, fb))

    def rank(self, word: str, candidates: Iterable[str], limit: Optional[int] = None) -> List[Match]:
        """
        依發音相近程度排序候選詞，只返回通過門檻者

        Args:
            word: 查詢詞
            candidates: 候選詞
            limit: 最多返回幾筆，None 表示不限

        Returns:
            List[Match]: 由近到遠排序
        """
        if limit is not None and limit < 0:
            raise ValueError(f"limit must be >= 0, got {limit}")

        with self._log_timing("EudexMatcher.rank"):
            target = self.fingerprint(word)
            folded = word.lower()

            scored: List[Tuple[int, int, int, Match]] = []
            total = 0
            for index, candidate in enumerate(candidates):
                total += 1
                fp = self.fingerprint(candidate)
                dist = distance(target, fp)
                if not self._accepts(dist):
                    continue
                edit = Levenshtein.distance(folded, candidate.lower())
                scored.append((dist, edit, index, Match(candidate, fp, dist, edit)))

            scored.sort(key=lambda item: item[:3])
            matches = [item[3] for item in scored]
            if limit is not None:
                matches = matches[:limit]

            self._logger.debug(f"rank({word!r}): {len(matches)}/{total} candidates kept")
            return matches

    def best_match(self, word: str, candidates: Iterable[str]) -> Optional[Match]:
        """返回最接近的候選詞，沒有通過門檻者時返回 None"""
        matches = self.rank(word, candidates, limit=1)
        return matches[0] if matches else None

    def group_similar(self, words: Iterable[str]) -> List[List[str]]:
        """
        將發音相似的單字分組 (去重用)

        每個單字加入第一個「組長」與其相似的群組，否則自成一組；
        組長為該群組的第一個單字，群組順序依首次出現排列。
        """
        with self._log_timing("EudexMatcher.group_similar"):
            leaders: List[int] = []
            groups: List[List[str]] = []

            for word in words:
                fp = self.fingerprint(word)
                for leader, group in zip(leaders, groups):
                    if self._accepts(distance(leader, fp)):
                        group.append(word)
                        break
                else:
                    leaders.append(fp)
                    groups.append([word])

            self._logger.debug(f"group_similar: {len(groups)} groups")
            return groups
