"""
工作流控制数据类 — 阶段、运行结果等，与具体组件解耦
"""
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional


class WorkflowPhase(Enum):
    """工作流阶段枚举（value 为进度提示文案）"""

    SCAN_PROJECT = "扫描项目..."
    FETCH_LAYOUT = "获取 Figma 布局..."
    PREPARE = "整理生成数据..."
    GENERATE = "生成 JSX 代码..."
    WRITE = "写入文件..."


class RunStatus(Enum):
    """一次调用的最终状态"""

    WRITTEN = "written"
    CANCELLED = "cancelled"
    FAILED = "failed"


@dataclass
class RunOutcome:
    """一次调用的结果，供入口决定退出码与提示"""

    status: RunStatus
    path: Optional[Path] = None
    error: Optional[Exception] = None
    remediation: str = ""
