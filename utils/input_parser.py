"""
设计稿引用解析器

支持以下输入格式：
  - https://www.figma.com/file/<file_key>/<文件名>
  - https://www.figma.com/design/<file_key>/<文件名>?node-id=<节点ID>
  - <file_key>（仅字母数字）
"""
import re
from urllib.parse import unquote

from messages.figma_messages import LayoutReference
from utils.errors import InvalidReference

_BARE_KEY_RE = re.compile(r"^[a-zA-Z0-9]+$")
# 支持 /design/ 和 /file/ 两种路径格式
_FILE_KEY_RE = re.compile(r"figma\.com/(?:file|design)/([a-zA-Z0-9]+)")
_NODE_ID_RE = re.compile(r"[?&]node-id=([^&#]+)")


def parse_reference(text: str) -> LayoutReference:
    """从 Figma 链接或 file key 中解析出 (file_key, node_id)。

    Raises:
        InvalidReference: 无法解析出 file key 时抛出，携带原始输入
    """
    trimmed = (text or "").strip()

    if _BARE_KEY_RE.match(trimmed):
        return LayoutReference(document_id=trimmed)

    match = _FILE_KEY_RE.search(trimmed)
    if not match:
        raise InvalidReference(text)

    node_match = _NODE_ID_RE.search(trimmed)
    node_id = unquote(node_match.group(1)) if node_match else None
    return LayoutReference(document_id=match.group(1), node_id=node_id or None)
