"""
日誌與計時工具

所有 logger 都掛在 `pyeudex` 命名空間底下，函式庫本身不主動設定 handler，
使用者可透過標準 logging 控制，或呼叫 enable_debug_logging() 快速開啟。

使用方式:
    from pyeudex.utils.logger import get_logger, TimingContext

    logger = get_logger("matcher")
    with TimingContext("rank", logger):
        ...
"""

import logging
import time
from functools import wraps
from typing import Callable, Optional

PACKAGE_LOGGER_NAME = "pyeudex"
DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

TimingCallback = Callable[[str, float], None]


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    取得 pyeudex 命名空間下的 logger

    Args:
        name: 子模組名稱 (例如 "matcher")，None 表示套件根 logger

    Returns:
        logging.Logger
    """
    if not name:
        return logging.getLogger(PACKAGE_LOGGER_NAME)
    if name.startswith(PACKAGE_LOGGER_NAME + ".") or name == PACKAGE_LOGGER_NAME:
        return logging.getLogger(name)
    return logging.getLogger(f"{PACKAGE_LOGGER_NAME}.{name}")


def setup_logger(level: int = logging.INFO, fmt: str = DEFAULT_FORMAT) -> logging.Logger:
    """
    為套件根 logger 加上 StreamHandler (重複呼叫只會更新等級，不會重複加 handler)
    """
    logger = get_logger()
    logger.setLevel(level)

    for handler in logger.handlers:
        if getattr(handler, "_pyeudex_handler", False):
            handler.setLevel(level)
            return logger

    handler = logging.StreamHandler()
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt))
    handler._pyeudex_handler = True
    logger.addHandler(handler)
    return logger


def enable_debug_logging() -> logging.Logger:
    """開啟完整 DEBUG 日誌"""
    return setup_logger(level=logging.DEBUG)


def enable_timing_logging() -> logging.Logger:
    """只開啟計時日誌，其餘維持 INFO"""
    logger = setup_logger(level=logging.INFO)
    get_logger("timing").setLevel(logging.DEBUG)
    # handler 等級需放寬，否則 timing 的 DEBUG 訊息會被擋下
    for handler in logger.handlers:
        if getattr(handler, "_pyeudex_handler", False):
            handler.setLevel(logging.DEBUG)
    return logger


class TimingContext:
    """
    計時上下文管理器

    屬性:
        operation: 操作名稱 (顯示於日誌與回呼)
        logger: 輸出日誌的 logger，預設為 `pyeudex.timing`
        level: 日誌等級
        callback: (operation, elapsed_seconds) -> None
        elapsed: 離開區塊後的耗時 (秒)

    使用範例:
        >>> with TimingContext("hash batch") as t:
        ...     ...
        >>> t.elapsed
    """

    def __init__(
        self,
        operation: str,
        logger: Optional[logging.Logger] = None,
        level: int = logging.DEBUG,
        callback: Optional[TimingCallback] = None,
    ):
        self.operation = operation
        self.logger = logger or get_logger("timing")
        self.level = level
        self.callback = callback
        self.elapsed = 0.0
        self._start = 0.0

    def __enter__(self) -> "TimingContext":
        self._start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        self.elapsed = time.perf_counter() - self._start
        self.logger.log(self.level, "%s took %.3fms", self.operation, self.elapsed * 1000)
        if self.callback is not None:
            self.callback(self.operation, self.elapsed)
        return False


def log_timing(operation: Optional[str] = None, level: int = logging.DEBUG):
    """
    以裝飾器形式計時函式

    範例:
        @log_timing("load words")
        def load(path): ...
    """
    def decorator(func: Callable) -> Callable:
        name = operation or func.__qualname__

        @wraps(func)
        def wrapper(*args, **kwargs):
            with TimingContext(name, level=level):
                return func(*args, **kwargs)

        return wrapper

    return decorator
