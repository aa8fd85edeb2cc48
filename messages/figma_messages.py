"""
Figma 设计稿相关数据类 — 与网络请求解耦，独立存放

DesignNode 是对 Figma REST 返回节点的类型化视图，只保留生成代码需要的字段。
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterator, List, Optional


class NodeKind(Enum):
    """节点类别"""

    CONTAINER = "container"
    TEXT = "text"
    COMPONENT_REF = "component_ref"


_COMPONENT_TYPES = {"COMPONENT", "COMPONENT_SET", "INSTANCE"}


@dataclass(frozen=True)
class LayoutReference:
    """解析后的设计稿引用"""

    document_id: str
    node_id: Optional[str] = None


@dataclass
class Bounds:
    """节点几何信息"""

    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0
    rotation: float = 0.0


@dataclass
class AutoLayout:
    """容器的自动布局描述（对应 flex 布局）"""

    mode: str = "NONE"                          # NONE / HORIZONTAL / VERTICAL
    primary_align: str = "MIN"                  # MIN / CENTER / MAX / SPACE_BETWEEN
    counter_align: str = "MIN"                  # MIN / CENTER / MAX
    padding_top: float = 0.0
    padding_right: float = 0.0
    padding_bottom: float = 0.0
    padding_left: float = 0.0
    item_spacing: float = 0.0
    wrap: bool = False

    @property
    def paddings(self) -> Dict[str, float]:
        return {
            "top": self.padding_top,
            "right": self.padding_right,
            "bottom": self.padding_bottom,
            "left": self.padding_left,
        }


@dataclass
class DesignNode:
    """布局树中的单个节点，父节点持有子节点，没有反向引用"""

    node_id: str
    name: str
    kind: NodeKind
    bounds: Bounds = field(default_factory=Bounds)
    visible: bool = True
    locked: bool = False
    fills: List[str] = field(default_factory=list)      # 纯色填充，#rrggbb
    corner_radius: Optional[float] = None

    # 容器
    auto_layout: Optional[AutoLayout] = None
    children: List["DesignNode"] = field(default_factory=list)

    # 文本
    font_size: Optional[float] = None
    characters: str = ""
    text_align: Optional[str] = None

    # 组件引用
    component_id: Optional[str] = None
    variant_properties: Dict[str, str] = field(default_factory=dict)

    def walk(self) -> Iterator["DesignNode"]:
        """深度优先遍历（含自身）。"""
        yield self
        for child in self.children:
            yield from child.walk()

    # ------------------------------------------------------------------
    # 从 Figma JSON 构造
    # ------------------------------------------------------------------

    @classmethod
    def from_figma(cls, raw: Dict[str, Any]) -> "DesignNode":
        node_type = raw.get("type", "")
        if node_type == "TEXT":
            kind = NodeKind.TEXT
        elif node_type in _COMPONENT_TYPES:
            kind = NodeKind.COMPONENT_REF
        else:
            kind = NodeKind.CONTAINER

        node = cls(
            node_id=str(raw.get("id", "")),
            name=raw.get("name", ""),
            kind=kind,
            bounds=_parse_bounds(raw),
            visible=raw.get("visible", True),
            locked=raw.get("locked", False),
            fills=_parse_solid_fills(raw.get("fills") or []),
            corner_radius=raw.get("cornerRadius"),
            auto_layout=_parse_auto_layout(raw),
            children=[cls.from_figma(child) for child in raw.get("children") or []],
        )

        if kind is NodeKind.TEXT:
            style = raw.get("style") or {}
            node.font_size = style.get("fontSize", raw.get("fontSize"))
            node.characters = raw.get("characters", "")
            node.text_align = style.get("textAlignHorizontal", raw.get("textAlignHorizontal"))
        elif kind is NodeKind.COMPONENT_REF:
            node.component_id = raw.get("componentId")
            node.variant_properties = _parse_variant_properties(raw)

        return node


# ============================================================
# Figma 响应解析
# ============================================================


def parse_design_tree(raw: Dict[str, Any]) -> List[DesignNode]:
    """将 /files 或 /files/:key/nodes 的响应解析为节点树列表。"""
    if "nodes" in raw:
        roots = []
        for entry in (raw.get("nodes") or {}).values():
            if entry and entry.get("document"):
                roots.append(DesignNode.from_figma(entry["document"]))
        return roots
    if "document" in raw:
        return [DesignNode.from_figma(raw["document"])]
    return [DesignNode.from_figma(raw)]


def layout_display_name(raw: Dict[str, Any]) -> str:
    """返回用于命名文件的显示名称：单节点请求取节点名，否则取文件名。"""
    nodes = raw.get("nodes") or {}
    if len(nodes) == 1:
        entry = next(iter(nodes.values())) or {}
        name = (entry.get("document") or {}).get("name")
        if name:
            return name
    return raw.get("name") or raw.get("title") or ""


def _parse_bounds(raw: Dict[str, Any]) -> Bounds:
    box = raw.get("absoluteBoundingBox") or raw
    return Bounds(
        x=box.get("x", 0.0) or 0.0,
        y=box.get("y", 0.0) or 0.0,
        width=box.get("width", 0.0) or 0.0,
        height=box.get("height", 0.0) or 0.0,
        rotation=raw.get("rotation", 0.0) or 0.0,
    )


def _parse_auto_layout(raw: Dict[str, Any]) -> Optional[AutoLayout]:
    mode = raw.get("layoutMode", "NONE")
    if mode not in ("HORIZONTAL", "VERTICAL"):
        return None
    return AutoLayout(
        mode=mode,
        primary_align=raw.get("primaryAxisAlignItems", "MIN"),
        counter_align=raw.get("counterAxisAlignItems", "MIN"),
        padding_top=raw.get("paddingTop", 0.0),
        padding_right=raw.get("paddingRight", 0.0),
        padding_bottom=raw.get("paddingBottom", 0.0),
        padding_left=raw.get("paddingLeft", 0.0),
        item_spacing=raw.get("itemSpacing", 0.0),
        wrap=raw.get("layoutWrap") == "WRAP",
    )


def _parse_solid_fills(fills: List[Dict[str, Any]]) -> List[str]:
    colors = []
    for paint in fills:
        if paint.get("type") != "SOLID" or paint.get("visible") is False:
            continue
        color = paint.get("color")
        if color:
            colors.append(color_to_hex(color))
    return colors


def _parse_variant_properties(raw: Dict[str, Any]) -> Dict[str, str]:
    if raw.get("variantProperties"):
        return {k: str(v) for k, v in raw["variantProperties"].items()}
    props = raw.get("componentProperties") or {}
    return {
        name: str(prop.get("value", ""))
        for name, prop in props.items()
        if isinstance(prop, dict) and prop.get("type") == "VARIANT"
    }


def color_to_hex(color: Dict[str, float]) -> str:
    """Figma RGBA（0‑1 浮点）→ #rrggbb。"""
    def channel(key: str) -> int:
        return max(0, min(255, round(color.get(key, 0.0) * 255)))
    return f"#{channel('r'):02x}{channel('g'):02x}{channel('b'):02x}"
