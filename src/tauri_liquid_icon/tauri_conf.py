"""
Tauri 配置（`tauri.conf.json` / `tauri.conf.json5`）中 macOS 打包文件项的更新。

只关心 `bundle.macOS.files["Resources/Assets.car"]`，其他字段原样写回。
已存在的条目不会被覆盖。
"""

from __future__ import annotations

import json
import os
import re

from . import console
from .tree_edit import set_default

FILES_PATH = ("bundle", "macOS", "files")
ASSETS_CAR_KEY = "Resources/Assets.car"

_BLOCK_COMMENT_RE = re.compile(r"/\*[\s\S]*?\*/")
_LINE_COMMENT_RE = re.compile(r"//.*")


def config_candidates(tauri_dir: str) -> list[str]:
    """按优先级列出可能的配置文件路径。"""
    parent = os.path.join(tauri_dir, "..")
    return [
        os.path.join(tauri_dir, "tauri.conf.json"),
        os.path.join(tauri_dir, "tauri.conf.json5"),
        os.path.join(parent, "tauri.conf.json"),
        os.path.join(parent, "tauri.conf.json5"),
    ]


def find_tauri_config(tauri_dir: str) -> str:
    """返回第一个存在的配置文件路径，找不到时返回空字符串。"""
    for path in config_candidates(tauri_dir):
        if os.path.exists(path):
            return path
    return ""


def strip_json_comments(text: str) -> str:
    """
    粗略去除 JSON5 注释：先去块注释，再去行注释。

    这是纯文本替换，不识别字符串字面量；字符串内出现的 `//` 或 `/*`
    （例如 URL）会被一并删掉。
    """
    return _LINE_COMMENT_RE.sub("", _BLOCK_COMMENT_RE.sub("", text))


def bundle_source_path(tauri_dir: str, output_dir: str) -> str:
    """计算 `Assets.car` 相对 tauri 目录的路径，统一使用 `/` 分隔。"""
    abs_tauri = os.path.abspath(tauri_dir)
    abs_output = os.path.abspath(output_dir)

    if abs_output == abs_tauri:
        rel = ""
    elif abs_output.startswith(abs_tauri.rstrip(os.sep) + os.sep):
        rel = abs_output[len(abs_tauri.rstrip(os.sep)) + 1:]
    else:
        # 不在 tauri 目录下时只取目录名，兄弟目录布局下结果可能不正确。
        rel = os.path.basename(abs_output)

    joined = os.path.join(rel, "Assets.car") if rel else "Assets.car"
    return joined.replace("\\", "/")


def load_tauri_config(path: str) -> dict:
    with open(path, encoding="utf-8") as f:
        text = f.read()
    if path.endswith(".json5"):
        text = strip_json_comments(text)
    obj = json.loads(text)
    if not isinstance(obj, dict):
        raise TypeError("top-level value is not an object")
    return obj


def save_tauri_config(path: str, config: dict) -> None:
    """以 2 空格缩进写回 JSON；`.json5` 源文件中的注释会丢失。"""
    data = json.dumps(config, indent=2, ensure_ascii=False) + "\n"
    with open(path, "w", encoding="utf-8") as f:
        f.write(data)


def update_tauri_config(tauri_dir: str, output_dir: str) -> bool:
    """把 `Assets.car` 加入 macOS 打包文件；失败只报告不中断，返回是否成功。"""
    config_path = find_tauri_config(tauri_dir)
    if not config_path:
        console.warn("tauri.conf.json not found")
        console.info("Skipping Tauri configuration modification")
        console.info("You may need to manually add Assets.car to bundle resources")
        return False

    name = os.path.basename(config_path)
    try:
        console.info(f"Updating {name}...")
        config = load_tauri_config(config_path)
        source = bundle_source_path(tauri_dir, output_dir)
        if not set_default(config, [*FILES_PATH, ASSETS_CAR_KEY], source):
            console.info("Assets.car already exists in macOS bundle files")
            return True
        save_tauri_config(config_path, config)
    except (OSError, TypeError, ValueError) as e:
        console.error(f"Failed to update {name}")
        console.detail(str(e))
        console.warn(
            "You may need to manually add Assets.car to bundle.macOS.files in your tauri config"
        )
        return False

    console.success(f"{name} updated with Assets.car in macOS bundle")
    return True
