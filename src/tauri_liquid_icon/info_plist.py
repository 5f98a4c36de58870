"""
`Info.plist` 的读取、兜底与写回。

任何读取或解析问题都降级为警告并使用最小模板，保证总能写出可用文档。
"""

from __future__ import annotations

import os
import plistlib
from typing import Any

from . import console
from .tree_edit import set_value

ICON_NAME_KEY = "CFBundleIconName"

DEFAULT_INFO_PLIST = b"""<?xml version="1.0" encoding="UTF-8"?>
<!DOCTYPE plist PUBLIC "-//Apple//DTD PLIST 1.0//EN" "http://www.apple.com/DTDs/PropertyList-1.0.dtd">
<plist version="1.0">
<dict>
</dict>
</plist>
"""


def info_plist_path(tauri_dir: str) -> str:
    return os.path.join(tauri_dir, "Info.plist")


def load_info_plist(path: str) -> dict[str, Any]:
    """读取 plist（XML/Binary 自动识别）；缺失、空白或损坏时回退到默认模板。"""
    if not os.path.exists(path):
        console.warn(f"Info.plist not found at {path}, creating new one")
        data = DEFAULT_INFO_PLIST
    else:
        with open(path, "rb") as f:
            data = f.read()
        # XML 声明前不允许有空白；二进制 plist 不能做裁剪。
        if not data.startswith(b"bplist"):
            data = data.strip()
        if not data:
            console.warn("Info.plist is empty, using default template")
            data = DEFAULT_INFO_PLIST

    try:
        obj = plistlib.loads(data)
    except Exception:
        obj = None
    if not isinstance(obj, dict):
        console.warn("Failed to parse existing Info.plist, using default template")
        obj = plistlib.loads(DEFAULT_INFO_PLIST)
    return obj


def save_plist_xml(path: str, obj: Any) -> None:
    """将对象以 XML plist 格式写回磁盘，保留原有键顺序。"""
    data = plistlib.dumps(obj, fmt=plistlib.FMT_XML, sort_keys=False)
    with open(path, "wb") as f:
        f.write(data)


def update_info_plist(tauri_dir: str, icon_name: str) -> bool:
    """写入 `CFBundleIconName`；失败只报告不中断，返回是否成功。"""
    path = info_plist_path(tauri_dir)
    try:
        console.info("Updating Info.plist...")
        plist_obj = load_info_plist(path)
        set_value(plist_obj, [ICON_NAME_KEY], icon_name)

        parent = os.path.dirname(path)
        if parent:
            os.makedirs(parent, exist_ok=True)
        save_plist_xml(path, plist_obj)
    except (OSError, OverflowError, TypeError, ValueError) as e:
        # plistlib 能读入超出 64 位的整数，但写回时抛 OverflowError。
        console.error("Failed to update Info.plist")
        console.detail(str(e))
        return False

    console.success("Info.plist updated")
    return True
