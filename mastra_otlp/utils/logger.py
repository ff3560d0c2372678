"""
导出器日志配置。

只配置 ``mastra_otlp`` 这一棵 Logger 树，不改动宿主应用的根 Logger:
- debug=True 时可以看到每次导出成功的 DEBUG 日志
- 失败时的 payload 诊断输出（ERROR）始终可见
- 可选写入滚动日志文件
"""

from __future__ import annotations

import logging
import os
from logging.handlers import RotatingFileHandler
from typing import List

PACKAGE_LOGGER = "mastra_otlp"
LOG_FORMAT = "%(asctime)s | %(name)s | %(levelname)s | %(message)s"

# marks handlers installed here so a second call replaces instead of stacking
_OWNED = "_mastra_otlp_handler"


def _owned_handlers(logger: logging.Logger) -> List[logging.Handler]:
    return [h for h in logger.handlers if getattr(h, _OWNED, False)]


def setup_logging(
    level: int = logging.INFO,
    log_file: str = "",
    debug: bool = False,
    propagate: bool = False,
) -> logging.Logger:
    """
    初始化 ``mastra_otlp`` Logger。

    Args:
        level: 日志级别。
        log_file: 日志文件路径（为空则仅输出到终端）。
        debug: 开启 DEBUG，显示 "Exporting span" / "Successfully exported" 日志。
        propagate: 是否同时交给根 Logger 处理（宿主已配置日志时使用）。

    Returns:
        ``mastra_otlp`` Logger 实例。
    """
    if debug:
        level = logging.DEBUG

    pkg = logging.getLogger(PACKAGE_LOGGER)
    pkg.setLevel(level)
    pkg.propagate = propagate

    for h in _owned_handlers(pkg):
        pkg.removeHandler(h)
        h.close()

    formatter = logging.Formatter(LOG_FORMAT)
    handlers: List[logging.Handler] = [logging.StreamHandler()]

    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        handlers.append(
            RotatingFileHandler(log_file, maxBytes=5 * 1024 * 1024, backupCount=3, encoding="utf-8")
        )

    for h in handlers:
        h.setFormatter(formatter)
        setattr(h, _OWNED, True)
        pkg.addHandler(h)

    # HTTP sends run via asyncio.to_thread; slow-callback warnings are noise unless debugging
    logging.getLogger("asyncio").setLevel(logging.DEBUG if debug else logging.WARNING)

    return pkg
