"""
目标项目扫描（只读）

  - 是否使用 Tailwind：优先检测 tailwind.config.*，其次检查 package.json 依赖
  - 可复用组件：递归列出 src/components 下的组件文件
"""
import json
import logging
import os
from typing import List, Optional

from config import settings
from messages.code_messages import ProjectScanResult, ReusableComponent

logger = logging.getLogger(__name__)


def scan_project(project_root: str) -> ProjectScanResult:
    """扫描项目的 Tailwind 配置与可复用组件。"""
    if not os.path.isdir(project_root):
        return ProjectScanResult()

    config_path = locate_tailwind_config(project_root)
    uses_tailwind = bool(config_path) or check_tailwind_dependency(project_root)
    components = list_components(project_root)

    logger.info(
        "项目扫描完成: tailwind=%s, 组件数=%d", uses_tailwind, len(components)
    )
    return ProjectScanResult(
        uses_tailwind=uses_tailwind,
        tailwind_config_path=config_path or "",
        components=components,
    )


def locate_tailwind_config(project_root: str) -> Optional[str]:
    """按固定顺序查找 tailwind.config.*，返回第一个存在的路径。"""
    for name in settings.TAILWIND_CONFIG_NAMES:
        path = os.path.join(project_root, name)
        if os.path.exists(path):
            return path
    return None


def check_tailwind_dependency(project_root: str) -> bool:
    """检查 package.json 的 dependencies / devDependencies 中是否声明了 Tailwind。"""
    package_json = os.path.join(project_root, "package.json")
    if not os.path.exists(package_json):
        return False

    try:
        with open(package_json, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.warning("package.json 读取失败: %s", e)
        return False

    if not isinstance(data, dict):
        return False
    deps = {**(data.get("dependencies") or {}), **(data.get("devDependencies") or {})}
    return any(pkg in deps for pkg in settings.TAILWIND_PACKAGES)


def list_components(project_root: str) -> List[ReusableComponent]:
    """递归列出组件文件，name 为去掉扩展名的文件名，path 相对于项目根目录。"""
    components_dir = os.path.join(project_root, settings.COMPONENTS_SCAN_DIR)
    if not os.path.isdir(components_dir):
        return []

    components: List[ReusableComponent] = []
    for root, dirs, filenames in os.walk(components_dir):
        dirs.sort()
        for filename in sorted(filenames):
            stem, ext = os.path.splitext(filename)
            if ext not in settings.COMPONENT_EXTENSIONS:
                continue
            rel_path = os.path.relpath(os.path.join(root, filename), project_root)
            components.append(ReusableComponent(name=stem, path=rel_path.replace("\\", "/")))
    return components
