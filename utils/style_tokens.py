"""
从设计稿节点树提取 Tailwind 样式提示

遍历可见节点，把间距、字号、圆角、纯色填充映射到 Tailwind 取值，
作为生成时的参考。超出容差的数值直接丢弃，不强行贴近某个类名。
"""
from typing import Iterable

from messages.code_messages import StyleTokens
from messages.figma_messages import DesignNode, NodeKind
from utils.breakpoints import breakpoint_for_width
from utils.tailwind_mapper import (
    FONT_SIZE_SCALE,
    FULL_RADIUS_THRESHOLD,
    RADIUS_SCALE,
    SPACING_SCALE,
    font_size_to_tailwind,
    map_with_tolerance,
    radius_to_tailwind,
)


def _px_key(value: float) -> str:
    return f"{value:g}px"


def extract_style_tokens(roots: Iterable[DesignNode]) -> StyleTokens:
    """遍历节点树生成 StyleTokens。"""
    tokens = StyleTokens()

    for root in roots:
        if not root.visible:
            continue
        screen = breakpoint_for_width(root.bounds.width)
        if screen:
            tokens.screens[root.name or root.node_id] = screen

        for node in _visible_nodes(root):
            _collect_spacing(node, tokens)
            _collect_font_size(node, tokens)
            _collect_radius(node, tokens)
            for color in node.fills:
                tokens.colors[color] = f"[{color}]"

    return tokens


def _visible_nodes(node: DesignNode):
    # 隐藏节点的整棵子树都不参与
    if not node.visible:
        return
    yield node
    for child in node.children:
        yield from _visible_nodes(child)


def _collect_spacing(node: DesignNode, tokens: StyleTokens) -> None:
    layout = node.auto_layout
    if layout is None:
        return
    values = list(layout.paddings.values()) + [layout.item_spacing]
    for px in values:
        if not px:
            continue
        label = map_with_tolerance(px, SPACING_SCALE)
        if label is not None:
            tokens.spacing[_px_key(px)] = label


def _collect_font_size(node: DesignNode, tokens: StyleTokens) -> None:
    if node.kind is not NodeKind.TEXT or not node.font_size:
        return
    if map_with_tolerance(node.font_size, FONT_SIZE_SCALE) is not None:
        tokens.font_size[_px_key(node.font_size)] = font_size_to_tailwind(node.font_size)


def _collect_radius(node: DesignNode, tokens: StyleTokens) -> None:
    radius = node.corner_radius
    if not radius:
        return
    if radius >= FULL_RADIUS_THRESHOLD or map_with_tolerance(radius, RADIUS_SCALE) is not None:
        tokens.border_radius[_px_key(radius)] = radius_to_tailwind(radius)
