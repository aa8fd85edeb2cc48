"""
终端交互宿主 — 输入框、进度、差异预览、确认、通知

编排器和写入工具只依赖以下方法，其它宿主（如编辑器插件）实现同名方法即可替换：
  ask_reference / progress / show_diff / confirm / info / warn / error
"""
import difflib
from pathlib import Path
from typing import Callable


class ConsoleHost:
    """基于 print / input 的 CLI 宿主"""

    def __init__(
        self,
        input_func: Callable[[str], str] = input,
        print_func: Callable[..., None] = print,
    ) -> None:
        self._input = input_func
        self._print = print_func
        self._progress_total = 0

    # ------------------------------------------------------------------
    # 输入
    # ------------------------------------------------------------------

    async def ask_reference(self) -> str:
        """请求用户输入 Figma 链接，空输入视为取消（返回空字符串）。"""
        return self._input("请输入 Figma 文件链接或 file key: ").strip()

    async def confirm(self, message: str) -> bool:
        answer = self._input(f"{message} [y/N]: ").strip().lower()
        return answer in ("y", "yes")

    # ------------------------------------------------------------------
    # 输出
    # ------------------------------------------------------------------

    def progress(self, message: str, increment: int = 0) -> None:
        self._progress_total = min(100, self._progress_total + increment)
        self._print(f"[{self._progress_total:3d}%] {message}")

    async def show_diff(self, left: Path, right: Path, title: str) -> None:
        """以 unified diff 形式打印两个文件的差异。"""
        before = left.read_text(encoding="utf-8", errors="replace").splitlines(keepends=True)
        after = right.read_text(encoding="utf-8", errors="replace").splitlines(keepends=True)
        self._print(f"━━━━ {title} ━━━━")
        for line in difflib.unified_diff(before, after, fromfile=str(left), tofile=str(right)):
            self._print(line.rstrip("\n"))

    def info(self, message: str) -> None:
        self._print(f"[提示] {message}")

    def warn(self, message: str) -> None:
        self._print(f"[警告] {message}")

    def error(self, message: str) -> None:
        self._print(f"[错误] {message}")
