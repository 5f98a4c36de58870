"""
对 Xcode `actool` 的轻量封装。

将 `.icon` 编译为 `Assets.car` 的命令细节收敛在此模块，
上层流程只关心成功与否，测试时可替换 `_run`。
"""

from __future__ import annotations

import os
import subprocess
from collections.abc import Callable

from . import console

PARTIAL_INFO_PLIST = "assetcatalog_generated_info.plist"


def _run(cmd: list[str], *, verbose: bool = False) -> str:
    """执行外部命令并返回 stdout，失败时抛出带输出的异常。"""
    if verbose:
        print(f"+ {' '.join(cmd)}")
    p = subprocess.run(cmd, capture_output=True, check=False)
    if p.returncode != 0:
        # actool 的 human-readable 输出把错误写在 stdout，两路都保留。
        streams = (p.stdout.decode(errors="replace"), p.stderr.decode(errors="replace"))
        text = "\n".join(s.rstrip("\n") for s in streams if s.strip())
        raise RuntimeError(f"Command failed: {' '.join(cmd)}\n{text}")
    return p.stdout.decode(errors="replace")


def build_compile_command(
    icon_path: str, output_dir: str, icon_name: str, min_target: str
) -> list[str]:
    """生成 actool 编译命令；路径参数应已是绝对路径。"""
    return [
        "xcrun",
        "actool",
        icon_path,
        "--compile",
        output_dir,
        "--output-format",
        "human-readable-text",
        "--notices",
        "--warnings",
        "--errors",
        "--output-partial-info-plist",
        os.path.join(output_dir, PARTIAL_INFO_PLIST),
        "--app-icon",
        icon_name,
        "--include-all-app-icons",
        "--enable-on-demand-resources",
        "NO",
        "--target-device",
        "mac",
        "--minimum-deployment-target",
        min_target,
        "--platform",
        "macosx",
    ]


def compile_icon(
    icon_path: str,
    output_dir: str,
    icon_name: str,
    min_target: str,
    *,
    verbose: bool = False,
    run: Callable[..., str] | None = None,
) -> bool:
    """编译 `.icon` 到输出目录下的 `Assets.car`，返回是否成功。"""
    run = run or _run
    console.info(f"Compiling {os.path.basename(os.path.normpath(icon_path))} using actool...")

    try:
        if not os.path.isdir(output_dir):
            os.makedirs(output_dir, exist_ok=True)
            console.success(f"Created output directory: {output_dir}")

        cmd = build_compile_command(
            os.path.abspath(icon_path),
            os.path.abspath(output_dir),
            icon_name,
            min_target,
        )
        output = run(cmd, verbose=verbose)
    except (OSError, RuntimeError) as e:
        console.error("Failed to compile icon with actool")
        console.detail(str(e))
        return False

    if output.strip():
        console.log(output.rstrip("\n"))
    console.success(f"Icon compiled successfully to {os.path.join(output_dir, 'Assets.car')}")
    return True
