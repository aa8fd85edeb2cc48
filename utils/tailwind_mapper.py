"""
像素值 → Tailwind 工具类映射

纯函数、确定性，不涉及任何 AI 调用。
每个刻度由两组等长的并行序列组成（像素值升序 + 类名后缀），
映射规则为"最近值"：距离相同时取下标较小的一项，超出两端时钳制到端点。
"""
import bisect
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple


@dataclass(frozen=True)
class UtilityScale:
    """不可变的离散刻度（像素值 ↔ 类名后缀）"""

    raw_values: Tuple[float, ...]
    labels: Tuple[str, ...]

    def __post_init__(self) -> None:
        if len(self.raw_values) != len(self.labels):
            raise ValueError(
                f"刻度长度不一致: {len(self.raw_values)} 个数值 / {len(self.labels)} 个类名"
            )
        if not self.raw_values:
            raise ValueError("刻度不能为空")
        for prev, cur in zip(self.raw_values, self.raw_values[1:]):
            if cur < prev:
                raise ValueError(f"刻度数值必须升序: {prev} > {cur}")

    @classmethod
    def from_pairs(cls, pairs: Sequence[Tuple[str, float]]) -> "UtilityScale":
        """由 (类名后缀, 像素值) 列表构造，列表需已按像素值升序排列。"""
        return cls(
            raw_values=tuple(value for _, value in pairs),
            labels=tuple(label for label, _ in pairs),
        )

    def value_of(self, label: str) -> float:
        """返回类名后缀对应的像素值。"""
        return self.raw_values[self.labels.index(label)]


# ============================================================
# 内置刻度
# ============================================================

# Tailwind 间距单位，1 单位 = 0.25rem = 4px
_SPACING_UNITS = (
    "0", "0.5", "1", "1.5", "2", "2.5", "3", "3.5", "4", "5", "6", "7", "8", "9",
    "10", "11", "12", "14", "16", "20", "24", "28", "32", "36", "40", "44", "48",
    "52", "56", "60", "64", "72", "80", "96",
)
SPACING_SCALE = UtilityScale(
    raw_values=tuple(float(unit) * 4 for unit in _SPACING_UNITS),
    labels=_SPACING_UNITS,
)

FONT_SIZE_SCALE = UtilityScale.from_pairs([
    ("xs", 12),
    ("sm", 14),
    ("base", 16),
    ("lg", 18),
    ("xl", 20),
    ("2xl", 24),
    ("3xl", 30),
    ("4xl", 36),
    ("5xl", 48),
    ("6xl", 60),
    ("7xl", 72),
    ("8xl", 96),
    ("9xl", 128),
])

# DEFAULT 对应不带后缀的 `rounded`
RADIUS_SCALE = UtilityScale.from_pairs([
    ("none", 0),
    ("sm", 2),
    ("DEFAULT", 4),
    ("md", 6),
    ("lg", 8),
    ("xl", 12),
    ("2xl", 16),
    ("3xl", 24),
    ("full", 9999),
])

FULL_RADIUS_THRESHOLD = 1000
NEGATIVE_MARKER = "-"


# ============================================================
# 最近值查找
# ============================================================


def find_closest_index(value: float, scale: UtilityScale) -> int:
    """二分定位 + 邻居扫描，返回与 value 距离最小的下标。

    邻居按下标升序检查，仅在距离严格更小时替换，因此等距时取较小下标。
    """
    raw = scale.raw_values
    last = len(raw) - 1
    if value <= raw[0]:
        return 0
    if value >= raw[last]:
        return last

    pos = bisect.bisect_left(raw, value)
    best_index = -1
    best_diff = 0.0
    for idx in (pos - 1, pos, pos + 1):
        if idx < 0 or idx > last:
            continue
        diff = abs(raw[idx] - value)
        if best_index < 0 or diff < best_diff:
            best_index = idx
            best_diff = diff
    return best_index


def map_to_scale(value: float, scale: UtilityScale) -> str:
    """将像素值映射为刻度上最近的类名后缀；负值映射绝对值后加负号前缀。"""
    # -0.0 不小于 0，映射结果不带负号
    if value < 0:
        return NEGATIVE_MARKER + scale.labels[find_closest_index(-value, scale)]
    return scale.labels[find_closest_index(value, scale)]


def map_with_tolerance(
    value: float,
    scale: UtilityScale,
    tolerance: Optional[float] = None,
) -> Optional[str]:
    """带容差的映射，距离超出容差时返回 None 而不是最近的类名。

    Args:
        value: 像素值
        scale: 目标刻度
        tolerance: 最大允许偏差，默认 max(匹配值的 50%, 2px)

    Returns:
        类名后缀，或 None（无可接受的映射）
    """
    magnitude = abs(value)
    idx = find_closest_index(magnitude, scale)
    matched = scale.raw_values[idx]
    diff = abs(matched - magnitude)

    max_diff = tolerance if tolerance is not None else max(matched * 0.5, 2)
    if diff > max_diff:
        return None

    label = scale.labels[idx]
    return NEGATIVE_MARKER + label if value < 0 else label


# ============================================================
# 分类包装
# ============================================================


def spacing_to_tailwind(px: float) -> str:
    """间距像素值 → Tailwind 间距后缀（如 '4'、'-2.5'）。"""
    return map_to_scale(px, SPACING_SCALE)


def font_size_to_tailwind(px: float) -> str:
    """字号像素值 → text-* 类名（如 'text-lg'）。"""
    return f"text-{map_to_scale(px, FONT_SIZE_SCALE)}"


def radius_to_tailwind(px: float, full_threshold: float = FULL_RADIUS_THRESHOLD) -> str:
    """圆角像素值 → rounded-* 类名；达到阈值一律视为 rounded-full。负值按 0 处理。"""
    px = max(px, 0)
    if px >= full_threshold:
        return "rounded-full"

    label = map_to_scale(px, RADIUS_SCALE)
    if label == "DEFAULT":
        return "rounded"
    return f"rounded-{label}"
