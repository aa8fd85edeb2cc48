"""
JSX 代码生成

流程：
  1. build_prompt       — 组装布局 JSON、组件清单、Tailwind 提示和规则
  2. code_writer.run    — 交给模型生成
  3. strip_code_fences  — 去掉模型附带的 ``` 代码块标记
  4. validate_markup    — Tailwind-only 校验，不通过直接拒绝
"""
import json
import logging
import re

from autogen_core.models import ChatCompletionClient

from agents.code_writer import create_code_writer
from messages.code_messages import GenerationRequest
from utils.errors import ServiceError
from workflow.markup_validator import validate_markup

logger = logging.getLogger(__name__)

GENERATION_RULES = (
    "Reuse components if names match",
    "Use flex/grid based on auto-layout",
    "Match spacing to nearest Tailwind class",
    "Target accuracy: 80%",
)

_OPENING_FENCE_RE = re.compile(r"^```(?:jsx?|tsx?)?[^\S\n]*\n?", re.IGNORECASE)
_CLOSING_FENCE_RE = re.compile(r"\n?```\s*$")


def build_prompt(request: GenerationRequest) -> str:
    """根据生成请求构建用户提示词。"""
    components_text = "\n".join(
        f"- {comp.name} ({comp.path})" for comp in request.components
    ) or "(none)"
    rules_text = "\n".join(f"- {rule}" for rule in GENERATION_RULES)

    return "\n".join([
        "Figma Layout:",
        json.dumps(request.layout, ensure_ascii=False, indent=2),
        "",
        "Existing Components:",
        components_text,
        "",
        "Tailwind Tokens:",
        json.dumps(request.tokens.to_dict(), ensure_ascii=False, indent=2),
        "",
        "Rules:",
        rules_text,
    ])


def strip_code_fences(content: str) -> str:
    """去掉首尾的 ```jsx / ```tsx / ``` 标记。"""
    cleaned = content.strip()
    cleaned = _OPENING_FENCE_RE.sub("", cleaned, count=1)
    cleaned = _CLOSING_FENCE_RE.sub("", cleaned, count=1)
    return cleaned.strip()


async def generate_text(model_client: ChatCompletionClient, prompt: str) -> str:
    """调用模型，返回最后一条回复的文本。

    Raises:
        ServiceError: 模型服务返回错误或没有文本回复
    """
    code_writer = create_code_writer(model_client)
    try:
        result = await code_writer.run(task=prompt)
    except Exception as e:
        # openai / anthropic 的 APIStatusError 都带 status_code
        status = getattr(e, "status_code", None)
        raise ServiceError("AI", f"{type(e).__name__}: {e}", status=status) from e

    reply = result.messages[-1] if result.messages else None
    content = getattr(reply, "content", None)
    if getattr(reply, "source", None) != code_writer.name or not isinstance(content, str):
        raise ServiceError("AI", "模型没有返回文本内容")
    return content


async def synthesize(request: GenerationRequest, model_client: ChatCompletionClient) -> str:
    """生成并校验 JSX。

    Raises:
        ServiceError: 模型调用失败
        ValidationRejected: 输出违反 Tailwind-only 约束
    """
    prompt = build_prompt(request)
    logger.debug("生成提示词长度: %d", len(prompt))

    raw = await generate_text(model_client, prompt)
    code = strip_code_fences(raw)
    return validate_markup(code)
