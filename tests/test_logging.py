"""
日誌、計時與配置測試
"""
import logging

import pytest

from pyeudex import EudexConfig, enable_timing_logging
from pyeudex.utils.logger import (
    TimingContext,
    enable_debug_logging,
    get_logger,
    log_timing,
    setup_logger,
)


@pytest.fixture
def package_logger():
    """還原套件 logger 的 handler 與等級，避免影響其他測試"""
    logger = logging.getLogger("pyeudex")
    saved_handlers = list(logger.handlers)
    saved_level = logger.level
    yield logger
    for handler in list(logger.handlers):
        if handler not in saved_handlers:
            logger.removeHandler(handler)
    logger.setLevel(saved_level)
    logging.getLogger("pyeudex.timing").setLevel(logging.NOTSET)


def _own_handlers(logger):
    return [h for h in logger.handlers if getattr(h, "_pyeudex_handler", False)]


class TestLogger:
    """logger 命名與設定"""

    def test_names(self):
        assert get_logger().name == "pyeudex"
        assert get_logger("matcher").name == "pyeudex.matcher"
        assert get_logger("pyeudex.core").name == "pyeudex.core"

    def test_setup_is_idempotent(self, package_logger):
        setup_logger(level=logging.INFO)
        setup_logger(level=logging.DEBUG)

        handlers = _own_handlers(package_logger)
        assert len(handlers) == 1
        assert handlers[0].level == logging.DEBUG
        assert package_logger.level == logging.DEBUG

    def test_enable_debug_logging(self, package_logger):
        enable_debug_logging()
        assert package_logger.level == logging.DEBUG

    def test_enable_timing_logging(self, package_logger):
        enable_timing_logging()
        assert package_logger.level == logging.INFO
        assert logging.getLogger("pyeudex.timing").level == logging.DEBUG

    def test_verbose_config(self, package_logger):
        EudexConfig(verbose=True)
        assert len(_own_handlers(package_logger)) == 1
        assert package_logger.level == logging.DEBUG

    def test_silent_config(self, package_logger):
        before = len(_own_handlers(package_logger))
        EudexConfig(verbose=False)
        assert len(_own_handlers(package_logger)) == before


class TestTiming:
    """計時工具"""

    def test_timing_context_callback(self):
        calls = []
        with TimingContext("op", callback=lambda op, elapsed: calls.append((op, elapsed))) as timer:
            sum(range(100))

        assert calls == [("op", timer.elapsed)]
        assert timer.elapsed >= 0

    def test_timing_context_logs(self, caplog):
        caplog.set_level(logging.DEBUG, logger="pyeudex.timing")
        with TimingContext("hash batch"):
            pass

        assert any("hash batch took" in record.getMessage() for record in caplog.records)

    def test_timing_context_does_not_swallow(self):
        calls = []
        with pytest.raises(KeyError):
            with TimingContext("failing", callback=lambda op, elapsed: calls.append(op)):
                raise KeyError("x")
        assert calls == ["failing"]

    def test_log_timing_decorator(self, caplog):
        caplog.set_level(logging.DEBUG, logger="pyeudex.timing")

        @log_timing("load words")
        def load(n):
            return list(range(n))

        assert load(3) == [0, 1, 2]
        assert load.__name__ == "load"
        assert any("load words took" in record.getMessage() for record in caplog.records)
