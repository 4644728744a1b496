"""
全域配置模組

提供統一的配置類別，控制日誌、計時與比對門檻等行為。

使用方式:
    from pyeudex import EudexMatcher

    # 簡單開啟 verbose 模式
    matcher = EudexMatcher(verbose=True)

    # 進階: 使用標準 logging 控制
    import logging
    logging.getLogger("pyeudex").setLevel(logging.DEBUG)
"""

import logging
from dataclasses import dataclass
from typing import Callable, Optional

from .utils.logger import setup_logger


def configure_logging(verbose: bool = False) -> None:
    """
    根據 verbose 設定配置 logging

    verbose=False 時不做任何事，讓使用者透過標準 logging 控制
    """
    if verbose:
        setup_logger(level=logging.DEBUG)


@dataclass
class EudexConfig:
    """
    比對器配置類別

    屬性:
        verbose: 是否開啟詳細日誌
        on_timing: 計時回呼函數 (operation: str, elapsed: float) -> None
        use_cache: 是否對單字指紋使用 LRU 快取
        max_distance: 加權距離上限 (含)；None 表示使用預設相似門檻 (< 15)

    使用範例:
        def my_callback(op, elapsed):
            print(f"{op} took {elapsed:.3f}s")

        config = EudexConfig(verbose=True, on_timing=my_callback, max_distance=20)
        matcher = EudexMatcher(config)
    """

    verbose: bool = False
    on_timing: Optional[Callable[[str, float], None]] = None
    use_cache: bool = True
    max_distance: Optional[int] = None

    def __post_init__(self):
        if self.max_distance is not None and self.max_distance < 0:
            raise ValueError(f"max_distance must be >= 0, got {self.max_distance}")
        configure_logging(self.verbose)
