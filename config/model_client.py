"""
模型客户端工厂 — 按服务商选择 autogen 模型客户端

两种后端对外接口一致（文本进、文本出）：
  - openai    : OpenAIChatCompletionClient，system 指令作为消息列表的第一条
  - anthropic : AnthropicChatCompletionClient，system 指令单独作为请求字段
"""
import logging

from autogen_core.models import ChatCompletionClient, ModelInfo

from config import settings
from config.settings import RunSettings
from utils.errors import MissingCredential, ServiceError

logger = logging.getLogger(__name__)


def create_model_client(run_settings: RunSettings) -> ChatCompletionClient:
    """根据 RunSettings 创建模型客户端。

    Raises:
        MissingCredential: 未配置 AI API key
        ServiceError: 服务商不受支持
    """
    provider = run_settings.ai_provider
    if provider not in settings.SUPPORTED_PROVIDERS:
        raise ServiceError("AI", f"不支持的 AI 服务商: {provider}")

    if not run_settings.ai_api_key:
        raise MissingCredential(
            "AI_API_KEY",
            "未配置 AI API key！\n"
            f"请设置环境变量 AI_API_KEY 或 {settings.PROVIDER_KEY_ENV[provider]}。",
        )

    model = run_settings.model_name
    logger.info("使用模型 %s (%s)", model, provider)

    if provider == "anthropic":
        from autogen_ext.models.anthropic import AnthropicChatCompletionClient

        return AnthropicChatCompletionClient(
            model=model,
            api_key=run_settings.ai_api_key,
            temperature=settings.MODEL_TEMPERATURE,
            max_tokens=settings.MODEL_MAX_TOKENS,
            model_info=_model_info("claude"),
        )

    from autogen_ext.models.openai import OpenAIChatCompletionClient

    return OpenAIChatCompletionClient(
        model=model,
        api_key=run_settings.ai_api_key,
        temperature=settings.MODEL_TEMPERATURE,
        max_tokens=settings.MODEL_MAX_TOKENS,
        model_info=_model_info("unknown"),
    )


def _model_info(family: str) -> ModelInfo:
    # 纯文本生成，不需要工具调用 / 视觉能力；显式声明以支持任意模型名
    return ModelInfo(
        vision=False,
        function_calling=False,
        json_output=False,
        structured_output=False,
        family=family,
    )
