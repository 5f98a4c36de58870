"""
plist / JSON 解析结果（嵌套 `dict`）的按路径修改工具。

设计原则：
- 仅在写入时按需创建中间字典，缺失或空值视为可替换。
- 中间节点已存在但不是字典时抛出 `TypeError`，不覆盖用户数据。
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any


def _describe(path: Sequence[str]) -> str:
    return ".".join(path) or "<root>"


def ensure_dict(root: Any, path: Sequence[str]) -> dict:
    """沿路径逐层取得字典，缺失或为空的层级替换为新字典，返回最内层。"""
    if not isinstance(root, dict):
        raise TypeError("root is not an object")
    cur = root
    for i, key in enumerate(path):
        nxt = cur.get(key)
        if not nxt:
            nxt = {}
            cur[key] = nxt
        elif not isinstance(nxt, dict):
            raise TypeError(f"{_describe(path[: i + 1])} is not an object")
        cur = nxt
    return cur


def set_value(root: Any, path: Sequence[str], value: Any) -> None:
    """在指定路径处设置值（必要时自动创建中间字典）。"""
    if not path:
        raise ValueError("empty key path")
    parent = ensure_dict(root, path[:-1])
    parent[path[-1]] = value


def set_default(root: Any, path: Sequence[str], value: Any) -> bool:
    """仅当路径处没有真值时写入，返回是否发生写入。"""
    if not path:
        raise ValueError("empty key path")
    parent = ensure_dict(root, path[:-1])
    if parent.get(path[-1]):
        return False
    parent[path[-1]] = value
    return True
