"""
主工作流编排器 — 单次调用按顺序执行

  Step 1: 扫描项目      — Tailwind 配置 + 可复用组件
  Step 2: 获取布局      — 解析链接，拉取 Figma 节点树
  Step 3: 整理数据      — 组装 GenerationRequest
  Step 4: 生成代码      — 模型生成 + Tailwind-only 校验
  Step 5: 写入文件      — 预览 / 确认 / 绝不覆盖

任一步失败即终止后续步骤；编排器不做任何重试或恢复，
只把异常归类并给出对应的用户提示。
"""
import logging
from typing import Optional

import httpx
from autogen_core.models import ChatCompletionClient

from config.model_client import create_model_client
from config.settings import RunSettings, load_run_settings
from messages.code_messages import GenerationRequest, StyleTokens, WriteIntent
from messages.figma_messages import layout_display_name, parse_design_tree
from messages.workflow_messages import RunOutcome, RunStatus, WorkflowPhase
from tools.figma_client import fetch_layout
from tools.file_tools import determine_target_folder, suggest_file_name, write_markup
from tools.license import validate_license
from tools.project_scanner import scan_project
from utils.errors import (
    AlreadyExists,
    Figma2TailwindError,
    InvalidFileName,
    InvalidReference,
    MissingCredential,
    ServiceError,
    ValidationRejected,
)
from utils.input_parser import parse_reference
from utils.style_tokens import extract_style_tokens
from workflow.synthesis import synthesize

logger = logging.getLogger(__name__)

# 各阶段的进度增量（合计 100）
_PHASE_INCREMENTS = {
    WorkflowPhase.SCAN_PROJECT: 10,
    WorkflowPhase.FETCH_LAYOUT: 30,
    WorkflowPhase.PREPARE: 10,
    WorkflowPhase.GENERATE: 30,
    WorkflowPhase.WRITE: 20,
}


# ============================================================
# 错误归类
# ============================================================


def remediation_for(error: Exception) -> str:
    """根据异常类型返回给用户的提示文本。"""
    if isinstance(error, InvalidReference):
        return (
            f"{error}\n"
            "支持的格式: https://www.figma.com/file/<key>/...、"
            "https://www.figma.com/design/<key>/...?node-id=1-2，或直接输入 file key。"
        )
    if isinstance(error, MissingCredential):
        hint = f"请在 .env 或环境变量中配置 {error.setting}。"
        return f"{error}\n{hint}"
    if isinstance(error, ServiceError):
        return f"{error}\n请求未自动重试，请稍后重试或检查服务配置。"
    if isinstance(error, ValidationRejected):
        return (
            f"代码生成失败: {error}（违反规则: {error.rule}）。"
            "请检查 AI 服务配置后重试。"
        )
    if isinstance(error, InvalidFileName):
        return f"{error}\n请通过 --name 指定不含路径的文件名，如 --name hero-card。"
    if isinstance(error, AlreadyExists):
        return f"{error}\n可使用 --preview 查看差异，或通过 --name 指定其它文件名。"
    return f"发生未知错误: {type(error).__name__}: {error}"


# ============================================================
# 核心工作流
# ============================================================


async def run_generation(
    reference: str,
    project_root: str,
    host,
    run_settings: Optional[RunSettings] = None,
    model_client: Optional[ChatCompletionClient] = None,
    http_client: Optional[httpx.AsyncClient] = None,
    file_name: Optional[str] = None,
    show_diff: bool = False,
) -> RunOutcome:
    """执行一次完整的 Figma → JSX 生成。

    Args:
        reference: Figma 链接或 file key
        project_root: 目标项目根目录
        host: 交互宿主（见 ui.console.ConsoleHost）
        run_settings: 本次调用的配置，默认从环境变量读取
        model_client: 可选的模型客户端，默认按配置创建
        http_client: 可选的 httpx 客户端（用于 Figma 请求）
        file_name: 指定文件名，默认由节点名称生成
        show_diff: 写入前是否展示差异预览（默认关闭，确认环节已把关）

    Returns:
        RunOutcome
    """
    run_settings = run_settings or load_run_settings()
    license_info = validate_license(run_settings.license_key)
    logger.info("License: %s (valid=%s)", license_info.tier, license_info.is_valid)

    def step(phase: WorkflowPhase) -> None:
        host.progress(phase.value, _PHASE_INCREMENTS[phase])

    try:
        step(WorkflowPhase.SCAN_PROJECT)
        scan = scan_project(project_root)

        step(WorkflowPhase.FETCH_LAYOUT)
        ref = parse_reference(reference)
        layout = await fetch_layout(
            ref.document_id, ref.node_id, token=run_settings.figma_token, http_client=http_client
        )

        step(WorkflowPhase.PREPARE)
        if scan.uses_tailwind:
            tokens = extract_style_tokens(parse_design_tree(layout))
        else:
            tokens = StyleTokens()
        request = GenerationRequest(
            layout=layout,
            tokens=tokens,
            components=tuple(scan.components),
        )

        step(WorkflowPhase.GENERATE)
        client = model_client or create_model_client(run_settings)
        try:
            code = await synthesize(request, client)
        finally:
            if model_client is None:
                await client.close()

        name = file_name or suggest_file_name(layout_display_name(layout))
        folder = determine_target_folder(project_root)

        step(WorkflowPhase.WRITE)
        path = await write_markup(
            code,
            WriteIntent(file_name=name, target_folder=folder, show_diff=show_diff),
            project_root,
            host,
        )
    except Figma2TailwindError as e:
        logger.warning("工作流失败: %s: %s", type(e).__name__, e)
        return RunOutcome(status=RunStatus.FAILED, error=e, remediation=remediation_for(e))

    if path is None:
        return RunOutcome(status=RunStatus.CANCELLED)

    host.info(f"组件已生成: {path.relative_to(project_root).as_posix()}")
    return RunOutcome(status=RunStatus.WRITTEN, path=path)
