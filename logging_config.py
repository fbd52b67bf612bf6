"""日志初始化

对局日志默认只写入文件（UTF-8，保证中文卡牌名不乱码），
终端留给棋盘视图；需要时可以打开 rich 控制台日志。
重复调用 setup_logging() 会复用已安装的处理器，按名字识别。

环境变量：
    DUCKDOG_LOG_LEVEL=DEBUG|INFO|WARNING|ERROR
    DUCKDOG_LOG_FILE=path/to/file.log
"""

from __future__ import annotations

import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

_FILE_HANDLER_NAME = "duckdog_file"
_CONSOLE_HANDLER_NAME = "duckdog_console"
DEFAULT_LOG_PATH = Path("logs") / "duckdog.log"

_FILE_FORMAT = "%(asctime)s %(levelname)-8s %(name)s:%(lineno)d | %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _parse_level(level: str | int) -> int:
    if isinstance(level, int):
        return level
    name = (level or "").strip().upper()
    return logging._nameToLevel.get(name, logging.INFO)


def _resolve_path(log_file: str | None) -> Path:
    if not log_file:
        return DEFAULT_LOG_PATH
    log_path = Path(log_file)
    if not log_path.is_absolute():
        log_path = Path.cwd() / log_path
    return log_path


def _find_handler(root: logging.Logger, name: str) -> logging.Handler | None:
    for handler in root.handlers:
        if handler.name == name:
            return handler
    return None


def _install_file_handler(root: logging.Logger, log_path: Path, level: int,
                          max_bytes: int, backup_count: int) -> None:
    handler = _find_handler(root, _FILE_HANDLER_NAME)
    if handler is None:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handler = RotatingFileHandler(
            str(log_path), maxBytes=max_bytes, backupCount=backup_count, encoding="utf-8"
        )
        handler.name = _FILE_HANDLER_NAME
        root.addHandler(handler)
    handler.setFormatter(logging.Formatter(fmt=_FILE_FORMAT, datefmt=_DATE_FORMAT))
    handler.setLevel(level)


def _install_console_handler(root: logging.Logger, level: int,
                             console: Console | None) -> None:
    handler = _find_handler(root, _CONSOLE_HANDLER_NAME)
    if handler is None:
        # 与棋盘视图共用同一个 Console，避免输出交错
        handler = RichHandler(console=console, show_path=False, markup=False)
        handler.name = _CONSOLE_HANDLER_NAME
        root.addHandler(handler)
    handler.setLevel(level)


def setup_logging(
    *,
    level: str | int = "INFO",
    log_file: str | None = None,
    enable_file: bool = True,
    enable_console: bool = False,
    console_level: str | int = "WARNING",
    console: Console | None = None,
    max_bytes: int = 2 * 1024 * 1024,
    backup_count: int = 5,
) -> logging.Logger:
    """
    配置根 logger

    Args:
        level: 文件日志级别，可被 DUCKDOG_LOG_LEVEL 覆盖
        log_file: 日志文件路径，可被 DUCKDOG_LOG_FILE 覆盖
        enable_console: 是否额外输出到 rich 控制台
        console: 控制台日志使用的 Console

    Returns:
        根 logger
    """
    level = os.environ.get("DUCKDOG_LOG_LEVEL") or level
    log_file = os.environ.get("DUCKDOG_LOG_FILE") or log_file

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)  # 由处理器过滤

    log_path = _resolve_path(log_file)
    if enable_file:
        _install_file_handler(root, log_path, _parse_level(level), max_bytes, backup_count)
    if enable_console:
        _install_console_handler(root, _parse_level(console_level), console)

    logging.getLogger(__name__).info(
        "Logging initialized | level=%s file=%s console=%s",
        level,
        log_path if enable_file else None,
        enable_console,
    )
    return root
