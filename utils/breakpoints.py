"""
Tailwind 响应式断点工具

默认断点: sm 640 / md 768 / lg 1024 / xl 1280 / 2xl 1536
"""
from typing import Dict, Optional

DEFAULT_BREAKPOINTS: Dict[str, int] = {
    "sm": 640,
    "md": 768,
    "lg": 1024,
    "xl": 1280,
    "2xl": 1536,
}

BREAKPOINT_ORDER = ("sm", "md", "lg", "xl", "2xl")


def with_breakpoint(breakpoint: str, class_name: str) -> str:
    """给类名加断点前缀，如 ('md', 'flex') → 'md:flex'。"""
    if not class_name:
        return class_name
    return f"{breakpoint}:{class_name}"


def breakpoint_for_width(
    width: float,
    breakpoints: Optional[Dict[str, int]] = None,
) -> Optional[str]:
    """返回宽度所达到的最大断点，小于 sm 时返回 None。"""
    breakpoints = breakpoints or DEFAULT_BREAKPOINTS
    for name in reversed(BREAKPOINT_ORDER):
        if name in breakpoints and width >= breakpoints[name]:
            return name
    return None


def responsive_classes(base_class: str, breakpoint_values: Dict[str, str]) -> str:
    """拼接基础类名和各断点下的变体类名（按断点从小到大）。"""
    classes = [base_class] if base_class else []
    for name in BREAKPOINT_ORDER:
        if breakpoint_values.get(name):
            classes.append(with_breakpoint(name, breakpoint_values[name]))
    return " ".join(classes)
