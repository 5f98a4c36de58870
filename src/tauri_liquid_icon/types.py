"""
CLI 与各处理阶段共享的轻量类型定义。
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class RunConfig:
    """一次运行的全部输入参数，解析后不再修改。"""

    # 未传入时为空字符串，由校验阶段统一报错。
    icon: str
    output: str
    name: str = "AppIcon"
    tauri_dir: str = "./src-tauri"
    min_target: str = "10.13"
    verbose: bool = False
