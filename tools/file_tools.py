"""
安全写入工具

写入规则：
  - 只写入 components/ 或 pages/，文件扩展名限定为 .tsx / .jsx
  - 目标文件已存在时绝不覆盖（可先展示差异预览）
  - 新文件可展示"空文件 ↔ 生成内容"的差异预览
  - 必须经用户确认后才真正写入
  - 预览用的临时文件放在 .figma-temp/ 中，延迟清理，清理失败不影响流程
"""
import asyncio
import logging
import os
import re
import time
from pathlib import Path
from typing import List, Optional

from config import settings
from messages.code_messages import WriteIntent
from utils.errors import AlreadyExists, InvalidFileName

logger = logging.getLogger(__name__)


# ============================================================
# 临时文件清理
# ============================================================


class ScratchJanitor:
    """延迟删除预览临时文件；进程退出前可通过 flush() 立即清理。"""

    def __init__(self, delay: float = settings.SCRATCH_CLEANUP_SECONDS) -> None:
        self._delay = delay
        self._pending: List[Path] = []

    def schedule(self, path: Path) -> None:
        self._pending.append(path)
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            return
        loop.call_later(self._delay, self._remove, path)

    def flush(self) -> None:
        """立即删除所有尚未清理的临时文件。"""
        for path in list(self._pending):
            self._remove(path)

    @property
    def pending(self) -> List[Path]:
        return list(self._pending)

    def _remove(self, path: Path) -> None:
        if path in self._pending:
            self._pending.remove(path)
        try:
            if path.exists():
                path.unlink()
        except OSError:
            logger.debug("临时文件清理失败（忽略）: %s", path)


scratch_janitor = ScratchJanitor()


# ============================================================
# 路径 / 命名
# ============================================================


def suggest_file_name(node_name: Optional[str], default_name: str = settings.DEFAULT_FILE_NAME) -> str:
    """将节点名称转换为文件名（小写、连字符分隔）。"""
    if not node_name:
        return default_name
    cleaned = re.sub(r"[^a-z0-9]+", "-", node_name.lower()).strip("-")
    return cleaned or default_name


def determine_target_folder(project_root: str) -> str:
    """components/ 存在时优先，其次 pages/，都不存在时默认 components。"""
    if os.path.exists(os.path.join(project_root, settings.COMPONENTS_FOLDER)):
        return settings.COMPONENTS_FOLDER
    if os.path.exists(os.path.join(project_root, settings.PAGES_FOLDER)):
        return settings.PAGES_FOLDER
    return settings.COMPONENTS_FOLDER


def file_exists(file_name: str, project_root: str, target_folder: Optional[str] = None) -> bool:
    """检查文件是否已存在于 components/（默认先查）或 pages/。"""
    folders = [target_folder] if target_folder else list(settings.TARGET_FOLDERS)
    return any(
        os.path.exists(os.path.join(project_root, folder, file_name))
        for folder in folders
    )


def resolve_markup_path(intent: WriteIntent, project_root: str) -> Path:
    """计算写入路径并确保目标目录存在；扩展名不是 .tsx/.jsx 时追加 .tsx。

    Raises:
        InvalidFileName: 文件名为空、为 . / ..，或含路径分隔符
    """
    if intent.target_folder not in settings.TARGET_FOLDERS:
        raise ValueError(f"无效的目标目录: {intent.target_folder}")

    file_name = intent.file_name
    if (
        not file_name
        or file_name in (".", "..")
        or "/" in file_name
        or "\\" in file_name
    ):
        raise InvalidFileName(file_name)

    target_dir = Path(project_root) / intent.target_folder
    target_dir.mkdir(parents=True, exist_ok=True)

    if os.path.splitext(file_name)[1].lower() not in settings.MARKUP_EXTENSIONS:
        file_name = f"{file_name}{settings.DEFAULT_EXTENSION}"
    return target_dir / file_name


# ============================================================
# 写入
# ============================================================


async def write_markup(
    content: str,
    intent: WriteIntent,
    project_root: str,
    host,
    janitor: Optional[ScratchJanitor] = None,
) -> Optional[Path]:
    """预览、确认后写入新文件。

    Args:
        content: 生成的 JSX
        intent: 写入意图（文件名、目标目录、是否预览）
        project_root: 目标项目根目录
        host: 交互宿主，需提供 show_diff / confirm / warn
        janitor: 临时文件清理器，默认使用模块级实例

    Returns:
        写入后的文件路径；用户取消时返回 None

    Raises:
        AlreadyExists: 目标文件已存在（不会修改已有文件）
    """
    janitor = janitor or scratch_janitor
    file_path = resolve_markup_path(intent, project_root)
    rel_path = os.path.relpath(file_path, project_root).replace("\\", "/")

    if file_path.exists():
        if intent.show_diff:
            await _preview_existing(file_path, content, project_root, host, janitor)
        raise AlreadyExists(rel_path)

    if intent.show_diff:
        await _preview_new(file_path, content, rel_path, project_root, host, janitor)

    if not await host.confirm(f"创建新文件: {rel_path}？"):
        logger.info("用户取消写入: %s", rel_path)
        return None

    # 确认期间可能有其它调用抢先写入同名文件，"x" 模式保证仍不覆盖
    try:
        with open(file_path, "x", encoding="utf-8") as f:
            f.write(content)
    except FileExistsError as e:
        raise AlreadyExists(rel_path) from e
    logger.info("文件已写入: %s", file_path)
    return file_path


def _scratch_path(project_root: str, prefix: str, file_name: str) -> Path:
    scratch_dir = Path(project_root) / settings.SCRATCH_DIR_NAME
    scratch_dir.mkdir(parents=True, exist_ok=True)
    return scratch_dir / f"{prefix}-{int(time.time() * 1000)}-{file_name}"


async def _preview_existing(
    file_path: Path,
    content: str,
    project_root: str,
    host,
    janitor: ScratchJanitor,
) -> None:
    """已有文件 ↔ 生成内容。预览失败只提示，不中断流程。"""
    try:
        generated = _scratch_path(project_root, "temp", file_path.name)
        generated.write_text(content, encoding="utf-8")
        janitor.schedule(generated)
        await host.show_diff(file_path, generated, f"{file_path.name} (Current) ↔ (Generated)")
    except (OSError, ValueError) as e:
        host.warn(f"差异预览失败: {e}")


async def _preview_new(
    file_path: Path,
    content: str,
    rel_path: str,
    project_root: str,
    host,
    janitor: ScratchJanitor,
) -> None:
    """空文件 ↔ 生成内容。"""
    try:
        generated = _scratch_path(project_root, "temp", file_path.name)
        empty = _scratch_path(project_root, "empty", file_path.name)
        generated.write_text(content, encoding="utf-8")
        empty.write_text("", encoding="utf-8")
        janitor.schedule(generated)
        janitor.schedule(empty)
        await host.show_diff(empty, generated, f"(New file) {rel_path} ↔ (Generated)")
    except (OSError, ValueError) as e:
        host.warn(f"差异预览失败: {e}")
