"""
快取工具

提供帶統計功能的 LRU 快取裝飾器。核心雜湊函式本身不快取，
需要重複查詢同一批單字時 (例如字典比對) 再由呼叫端套用。

用法：
    from pyeudex.utils.cache import cached_function, get_cache_stats

    @cached_function(maxsize=1000)
    def expensive(word: str) -> int:
        ...
"""

import threading
from functools import lru_cache, wraps
from typing import Any, Callable, Dict, List, Optional


# 全域快取統計
_cache_stats_lock = threading.Lock()
_cache_stats: Dict[str, Dict[str, int]] = {}
_cached_wrappers: List[Callable] = []


def _empty_stats(maxsize: int) -> Dict[str, int]:
    return {"hits": 0, "misses": 0, "size": 0, "maxsize": maxsize}


def cached_function(maxsize: int = 1000, name: Optional[str] = None):
    """
    為一般函式加上 LRU 快取並記錄命中統計

    與直接使用 functools.lru_cache 的差別：
    1. 命中/未命中次數會累計到全域統計 (get_cache_stats)
    2. 可指定統計用名稱，同名快取的統計會被重新計算

    命中與否是比對呼叫前後的 cache_info() 判斷，多執行緒同時呼叫時
    hits/misses 的歸屬只是近似值；計數的更新本身在鎖內，總次數不會遺漏。

    Args:
        maxsize: 最大快取項數量 (0 表示不快取，只做統計)
        name: 統計用 key，預設為 "<module>.<qualname>"

    範例：
        >>> @cached_function(maxsize=100)
        ... def double(x):
        ...     return x * 2
        >>> double(5)
        10
        >>> double.cache_info().hits
        0
    """
    def decorator(func: Callable) -> Callable:
        cache_key = name or f"{func.__module__}.{func.__qualname__}"

        with _cache_stats_lock:
            _cache_stats[cache_key] = _empty_stats(maxsize)

        cached_func = lru_cache(maxsize=maxsize)(func)

        @wraps(func)
        def wrapper(*args):
            before = cached_func.cache_info()
            result = cached_func(*args)
            after = cached_func.cache_info()

            with _cache_stats_lock:
                stats = _cache_stats.setdefault(cache_key, _empty_stats(maxsize))
                if after.hits > before.hits:
                    stats["hits"] += 1
                else:
                    stats["misses"] += 1
                stats["size"] = after.currsize

            return result

        wrapper.cache_info = cached_func.cache_info
        wrapper.cache_clear = cached_func.cache_clear
        wrapper.cache_key = cache_key

        with _cache_stats_lock:
            _cached_wrappers.append(wrapper)

        return wrapper

    return decorator


def _hit_rate(hits: int, misses: int) -> float:
    calls = hits + misses
    return hits / calls if calls else 0.0


def get_cache_stats(method_name: Optional[str] = None) -> Dict[str, Any]:
    """
    獲取快取統計

    Args:
        method_name: 統計 key 的片段 (如 "eudex_hash")；
                    None 時返回所有快取的摘要

    Returns:
        Dict: 指定名稱時為所有符合 key 的合計 (methods/hits/misses/hit_rate/size/maxsize)，
              沒有符合的 key 時為空 dict；
              未指定時為 overall_hit_rate/total_hits/total_misses/total_calls/methods
    """
    with _cache_stats_lock:
        snapshot = {key: dict(stats) for key, stats in _cache_stats.items()}

    if method_name is None:
        hits = sum(s["hits"] for s in snapshot.values())
        misses = sum(s["misses"] for s in snapshot.values())
        return {
            "overall_hit_rate": _hit_rate(hits, misses),
            "total_hits": hits,
            "total_misses": misses,
            "total_calls": hits + misses,
            "methods": snapshot,
        }

    matched = {key: s for key, s in snapshot.items() if method_name in key}
    if not matched:
        return {}

    hits = sum(s["hits"] for s in matched.values())
    misses = sum(s["misses"] for s in matched.values())
    return {
        "methods": list(matched),
        "hits": hits,
        "misses": misses,
        "hit_rate": _hit_rate(hits, misses),
        "size": max(s["size"] for s in matched.values()),
        "maxsize": max(s["maxsize"] for s in matched.values()),
    }


def reset_cache_stats() -> None:
    """
    重置快取統計 (用於測試隔離)

    只重置計數，不清除快取內容
    """
    with _cache_stats_lock:
        for stats in _cache_stats.values():
            stats["hits"] = 0
            stats["misses"] = 0


def clear_all_caches() -> None:
    """清除所有 cached_function 快取內容與統計"""
    with _cache_stats_lock:
        wrappers = list(_cached_wrappers)
        for key, stats in _cache_stats.items():
            _cache_stats[key] = _empty_stats(stats["maxsize"])

    for wrapper in wrappers:
        wrapper.cache_clear()


def get_hit_rate(method_name: Optional[str] = None) -> float:
    """
    獲取快取命中率 (便捷函數)

    Returns:
        float: 命中率 (0.0-1.0)，無統計時為 0.0
    """
    stats = get_cache_stats(method_name)
    if not stats:
        return 0.0
    if method_name is not None:
        return stats["hit_rate"]
    return stats["overall_hit_rate"]
