"""
代码生成 / 写入相关数据类 — 与智能体解耦，独立存放
"""
from dataclasses import dataclass, field
from typing import Any, Dict, List, Tuple


@dataclass
class StyleTokens:
    """按分类组织的 Tailwind 样式提示：token 名 → Tailwind 取值"""

    spacing: Dict[str, str] = field(default_factory=dict)
    colors: Dict[str, str] = field(default_factory=dict)
    font_size: Dict[str, str] = field(default_factory=dict)
    border_radius: Dict[str, str] = field(default_factory=dict)
    screens: Dict[str, str] = field(default_factory=dict)

    def is_empty(self) -> bool:
        return not any(self.to_dict().values())

    def to_dict(self) -> Dict[str, Dict[str, str]]:
        """按 Tailwind 配置的键名输出，空分类不输出。"""
        data = {
            "spacing": self.spacing,
            "colors": self.colors,
            "fontSize": self.font_size,
            "borderRadius": self.border_radius,
            "screens": self.screens,
        }
        return {key: value for key, value in data.items() if value}


@dataclass(frozen=True)
class ReusableComponent:
    """项目中已存在的可复用组件，以相对路径区分（名称可能重复）"""

    name: str
    path: str


@dataclass(frozen=True)
class GenerationRequest:
    """一次代码生成的完整输入，不做持久化"""

    layout: Dict[str, Any]
    tokens: StyleTokens = field(default_factory=StyleTokens)
    components: Tuple[ReusableComponent, ...] = ()


@dataclass(frozen=True)
class WriteIntent:
    """一次待执行的写入"""

    file_name: str
    target_folder: str = "components"   # components / pages
    show_diff: bool = True


@dataclass
class ProjectScanResult:
    """项目扫描结果"""

    uses_tailwind: bool = False
    tailwind_config_path: str = ""
    components: List[ReusableComponent] = field(default_factory=list)
