"""
`tauri-liquid-icon` 的命令行入口模块。

依次完成：平台检查、参数解析与校验、调用 actool 编译 `.icon`、
更新 `Info.plist`、更新 Tauri 配置。
"""

import argparse
import os
import sys
from collections.abc import Sequence

from . import console
from .actool import compile_icon
from .info_plist import update_info_plist
from .tauri_conf import update_tauri_config
from .types import RunConfig

ICON_EXTENSION = ".icon"
HELP_HINT = "\nUse --help for usage information"

# 取值型选项及其别名；紧随其后的参数一律作为取值，即使以 `-` 开头。
_VALUE_FLAGS = {
    "-i": "--icon",
    "--icon": "--icon",
    "-n": "--name",
    "--name": "--name",
    "-o": "--output",
    "--output": "--output",
    "--tauri-dir": "--tauri-dir",
    "--min-target": "--min-target",
}

_EPILOG = """\
Examples:
  # Basic usage
  tauri-liquid-icon --icon ./Icon.icon --output ./src-tauri/resources

  # Custom icon asset name
  tauri-liquid-icon -i ./assets/Icon.icon -n Icon -o ./src-tauri/icons

  # Specify Tauri directory
  tauri-liquid-icon -i ./Icon.icon -o ./src-tauri/resources --tauri-dir ./src-tauri

What this tool does:
  1. Compiles .icon file using actool to generate Assets.car
  2. Updates Info.plist with a CFBundleIconName entry
  3. Updates tauri.conf.json to bundle the Assets.car file

Pass --verbose to print the actool command line before it runs.
"""


class _ArgumentParser(argparse.ArgumentParser):
    """用法错误统一按失败退出码 1 处理，并给出帮助提示。"""

    def error(self, message: str) -> None:  # type: ignore[override]
        console.error(message)
        console.log(HELP_HINT)
        raise SystemExit(1)


def _is_macos() -> bool:
    return sys.platform == "darwin"


def build_parser() -> argparse.ArgumentParser:
    """构建并返回 `tauri-liquid-icon` 命令行参数解析器。"""
    p = _ArgumentParser(
        prog="tauri-liquid-icon",
        formatter_class=argparse.RawTextHelpFormatter,
        allow_abbrev=False,
        description="Integrate Icon Composer (.icon) assets into Tauri macOS apps",
        epilog=_EPILOG,
    )

    # 必填项不交给 argparse 校验，便于一次性列出全部缺失参数。
    p.add_argument("-i", "--icon", default="", help="Path to the .icon file (Icon Composer asset)")
    p.add_argument(
        "-o",
        "--output",
        default="",
        help="Output directory of Assets.car (e.g., ./src-tauri/resources)",
    )
    p.add_argument("-n", "--name", default="AppIcon", help="Icon name (default: %(default)s)")
    p.add_argument(
        "--tauri-dir",
        default="./src-tauri",
        help="Tauri directory (default: %(default)s)",
    )
    p.add_argument(
        "--min-target",
        default="10.13",
        help="Minimum deployment target (default: %(default)s)",
    )
    p.add_argument("--verbose", action="store_true", help="Print the actool command line")
    return p


def _bind_flag_values(argv: Sequence[str]) -> list[str]:
    """把取值型选项与下一个参数合并为 `--flag=value`，避免 argparse 把 `-x` 当作选项。"""
    out: list[str] = []
    i = 0
    while i < len(argv):
        token = argv[i]
        flag = _VALUE_FLAGS.get(token)
        if flag and i + 1 < len(argv):
            out.append(f"{flag}={argv[i + 1]}")
            i += 2
            continue
        out.append(token)
        i += 1
    return out


def parse_config(argv: Sequence[str] | None = None) -> RunConfig:
    """解析命令行为 `RunConfig`；未知选项直接报错退出，多余位置参数忽略。"""
    parser = build_parser()
    if argv is None:
        argv = sys.argv[1:]
    ns, extras = parser.parse_known_args(_bind_flag_values(argv))
    for token in extras:
        if token.startswith("-"):
            console.error(f"Unknown argument: {token}")
            console.log(HELP_HINT)
            raise SystemExit(1)

    return RunConfig(
        icon=ns.icon or "",
        output=ns.output or "",
        name=ns.name,
        tauri_dir=ns.tauri_dir,
        min_target=ns.min_target,
        verbose=bool(ns.verbose),
    )


def validate_config(config: RunConfig) -> list[str]:
    """收集全部校验错误，返回空列表表示通过。"""
    errors: list[str] = []

    if not config.icon:
        errors.append("--icon is required")
    elif not os.path.exists(config.icon):
        errors.append(f"Icon file not found: {config.icon}")
    elif not config.icon.endswith(ICON_EXTENSION):
        errors.append(f"Icon file must have {ICON_EXTENSION} extension")

    if not config.output:
        errors.append("--output is required")

    return errors


def main(argv: Sequence[str] | None = None) -> int:
    """CLI 入口：按顺序执行编译与两个配置文件的更新。"""
    print(console.paint("\n🎨 Tauri Liquid Icon Setup\n", "bold", "cyan"))

    if not _is_macos():
        console.error("This tool requires Xcode to function and can only be run on macOS")
        raise SystemExit(1)

    config = parse_config(argv)
    errors = validate_config(config)
    if errors:
        for err in errors:
            console.error(err)
        console.log(HELP_HINT)
        raise SystemExit(1)

    compiled = compile_icon(
        config.icon,
        config.output,
        config.name,
        config.min_target,
        verbose=config.verbose,
    )
    if not compiled:
        raise SystemExit(1)

    # 以下两步失败只提示，不影响退出码。
    update_info_plist(config.tauri_dir, config.name)
    update_tauri_config(config.tauri_dir, config.output)

    console.log("")
    console.success("Icon setup complete!")
    console.info("\nNext steps:")
    console.info("  1. Build your Tauri app")
    console.info("  2. Verify the icon appears in your macOS application")
    console.log("")
    return 0
