"""测试公共配置与夹具"""
import os
import sys
from pathlib import Path

import pytest

# 将项目根目录添加到 Python 路径
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


class FakeHost:
    """记录所有交互的宿主替身，confirm 的回答由 answer 决定"""

    def __init__(self, answer: bool = True, reference: str = "") -> None:
        self.answer = answer
        self.reference = reference
        self.progress_messages = []
        self.diffs = []
        self.confirms = []
        self.infos = []
        self.warnings = []
        self.errors = []

    async def ask_reference(self) -> str:
        return self.reference

    async def confirm(self, message: str) -> bool:
        self.confirms.append(message)
        return self.answer

    def progress(self, message: str, increment: int = 0) -> None:
        self.progress_messages.append((message, increment))

    async def show_diff(self, left: Path, right: Path, title: str) -> None:
        # 记录调用时两侧文件的内容，临时文件随后可能被清理
        self.diffs.append({
            "left": left,
            "right": right,
            "left_text": left.read_text(encoding="utf-8"),
            "right_text": right.read_text(encoding="utf-8"),
            "title": title,
        })

    def info(self, message: str) -> None:
        self.infos.append(message)

    def warn(self, message: str) -> None:
        self.warnings.append(message)

    def error(self, message: str) -> None:
        self.errors.append(message)


@pytest.fixture
def host():
    """会确认写入的宿主"""
    return FakeHost(answer=True)


@pytest.fixture
def declining_host():
    """拒绝写入的宿主"""
    return FakeHost(answer=False)


@pytest.fixture
def tailwind_project(tmp_path):
    """带 tailwind.config.js、package.json 和两个组件的项目目录"""
    (tmp_path / "tailwind.config.js").write_text("module.exports = {}\n", encoding="utf-8")
    (tmp_path / "package.json").write_text(
        '{"devDependencies": {"tailwindcss": "^3.4.0"}}', encoding="utf-8"
    )
    components = tmp_path / "src" / "components"
    (components / "ui").mkdir(parents=True)
    (components / "Button.tsx").write_text("export const Button = () => null\n", encoding="utf-8")
    (components / "ui" / "Card.jsx").write_text("export const Card = () => null\n", encoding="utf-8")
    (components / "styles.css").write_text(".x {}\n", encoding="utf-8")
    return tmp_path


@pytest.fixture
def plain_project(tmp_path):
    """没有任何 Tailwind 痕迹的空项目"""
    return tmp_path


@pytest.fixture
def hero_node():
    """一个带自动布局、文本和组件实例的 Figma 节点"""
    return {
        "id": "1:2",
        "name": "Hero Card",
        "type": "FRAME",
        "absoluteBoundingBox": {"x": 0, "y": 0, "width": 800, "height": 400},
        "layoutMode": "VERTICAL",
        "primaryAxisAlignItems": "CENTER",
        "counterAxisAlignItems": "MIN",
        "paddingTop": 16,
        "paddingRight": 24,
        "paddingBottom": 16,
        "paddingLeft": 24,
        "itemSpacing": 8,
        "cornerRadius": 8,
        "fills": [{"type": "SOLID", "color": {"r": 1, "g": 1, "b": 1, "a": 1}}],
        "children": [
            {
                "id": "1:3",
                "name": "Title",
                "type": "TEXT",
                "absoluteBoundingBox": {"x": 24, "y": 16, "width": 300, "height": 28},
                "characters": "Welcome",
                "style": {"fontSize": 19, "textAlignHorizontal": "LEFT"},
                "fills": [{"type": "SOLID", "color": {"r": 0, "g": 0, "b": 0, "a": 1}}],
            },
            {
                "id": "1:4",
                "name": "Primary Button",
                "type": "INSTANCE",
                "componentId": "9:1",
                "absoluteBoundingBox": {"x": 24, "y": 60, "width": 120, "height": 40},
                "cornerRadius": 9999,
                "componentProperties": {
                    "Size": {"type": "VARIANT", "value": "Large"},
                    "Label": {"type": "TEXT", "value": "Go"},
                },
            },
            {
                "id": "1:5",
                "name": "Hidden Badge",
                "type": "FRAME",
                "visible": False,
                "cornerRadius": 4,
                "fills": [{"type": "SOLID", "color": {"r": 1, "g": 0, "b": 0, "a": 1}}],
            },
        ],
    }


@pytest.fixture
def nodes_response(hero_node):
    """GET /v1/files/:key/nodes 的响应"""
    return {
        "name": "Landing Page",
        "nodes": {"1:2": {"document": hero_node, "components": {}}},
    }


@pytest.fixture
def file_response(hero_node):
    """GET /v1/files/:key 的响应"""
    return {
        "name": "Landing Page",
        "document": {
            "id": "0:0",
            "name": "Document",
            "type": "DOCUMENT",
            "children": [hero_node],
        },
    }
