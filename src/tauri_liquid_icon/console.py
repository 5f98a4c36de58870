"""
终端输出格式化工具。

纯函数模块：只负责给文本加颜色与状态前缀，不保存任何状态。
"""

from __future__ import annotations

import sys

COLORS = {
    "reset": "\x1b[0m",
    "green": "\x1b[32m",
    "yellow": "\x1b[33m",
    "red": "\x1b[31m",
    "cyan": "\x1b[36m",
    "bold": "\x1b[1m",
}


def paint(message: str, *styles: str) -> str:
    """用给定样式包裹文本，末尾恢复默认样式。"""
    prefix = "".join(COLORS[s] for s in styles)
    return f"{prefix}{message}{COLORS['reset']}"


def log(message: str, color: str = "reset") -> None:
    print(paint(message, color))


def error(message: str) -> None:
    log(f"✗ {message}", "red")


def success(message: str) -> None:
    log(f"✓ {message}", "green")


def info(message: str) -> None:
    log(f"ℹ {message}", "cyan")


def warn(message: str) -> None:
    log(f"⚠ {message}", "yellow")


def detail(message: str) -> None:
    """把异常或外部工具的原始错误文本输出到 stderr。"""
    print(message, file=sys.stderr)
