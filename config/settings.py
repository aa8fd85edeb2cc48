"""
全局配置 — Figma / AI 服务参数、写入策略等

固定参数为模块级常量；凭证类配置每次调用都通过 load_run_settings() 重新读取，
不会在两次调用之间共享。
"""
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

# ============================================================
# 项目根目录
# ============================================================
PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

# 加载 .env 文件（位于项目根目录）
load_dotenv(os.path.join(PROJECT_ROOT, ".env"))

# ============================================================
# Figma 配置
# ============================================================
FIGMA_API_BASE = "https://api.figma.com/v1"
FIGMA_REQUEST_TIMEOUT = 30.0
FIGMA_TOKEN_HELP_URL = "https://www.figma.com/developers/api#access-tokens"

# ============================================================
# 模型配置
# ============================================================
SUPPORTED_PROVIDERS = ("openai", "anthropic")
DEFAULT_PROVIDER = "openai"
DEFAULT_MODELS = {
    "openai": "gpt-4",
    "anthropic": "claude-3-5-sonnet-latest",
}
# 各服务商对应的后备环境变量
PROVIDER_KEY_ENV = {
    "openai": "OPENAI_API_KEY",
    "anthropic": "ANTHROPIC_API_KEY",
}
MODEL_TEMPERATURE = 0.3
MODEL_MAX_TOKENS = 4000

# ============================================================
# 写入配置
# ============================================================
COMPONENTS_FOLDER = "components"
PAGES_FOLDER = "pages"
TARGET_FOLDERS = (COMPONENTS_FOLDER, PAGES_FOLDER)
MARKUP_EXTENSIONS = (".tsx", ".jsx")
DEFAULT_EXTENSION = ".tsx"
DEFAULT_FILE_NAME = "component"

SCRATCH_DIR_NAME = ".figma-temp"   # 差异预览临时文件目录（相对项目根目录）
SCRATCH_CLEANUP_SECONDS = 30

# ============================================================
# 项目扫描配置
# ============================================================
TAILWIND_CONFIG_NAMES = (
    "tailwind.config.js",
    "tailwind.config.cjs",
    "tailwind.config.mjs",
    "tailwind.config.ts",
)
TAILWIND_PACKAGES = ("tailwindcss", "@tailwindcss/typography", "@tailwindcss/forms")
COMPONENTS_SCAN_DIR = os.path.join("src", "components")
COMPONENT_EXTENSIONS = (".tsx", ".jsx", ".ts", ".js", ".vue", ".svelte")


# ============================================================
# 单次调用配置
# ============================================================


@dataclass
class RunSettings:
    """单次调用使用的凭证与模型选择"""

    figma_token: Optional[str] = None
    ai_provider: str = DEFAULT_PROVIDER
    ai_api_key: Optional[str] = None
    ai_model: Optional[str] = None
    license_key: Optional[str] = None

    @property
    def model_name(self) -> str:
        return self.ai_model or DEFAULT_MODELS.get(self.ai_provider, DEFAULT_MODELS[DEFAULT_PROVIDER])


def load_run_settings(
    figma_token: Optional[str] = None,
    ai_provider: Optional[str] = None,
    ai_api_key: Optional[str] = None,
    ai_model: Optional[str] = None,
) -> RunSettings:
    """读取本次调用的配置，调用方传入的值优先于环境变量。"""
    provider = (ai_provider or os.getenv("AI_PROVIDER") or DEFAULT_PROVIDER).strip().lower()
    api_key = ai_api_key or os.getenv("AI_API_KEY")
    if not api_key and provider in PROVIDER_KEY_ENV:
        api_key = os.getenv(PROVIDER_KEY_ENV[provider])

    return RunSettings(
        figma_token=figma_token or os.getenv("FIGMA_TOKEN") or None,
        ai_provider=provider,
        ai_api_key=api_key or None,
        ai_model=ai_model or os.getenv("AI_MODEL") or None,
        license_key=os.getenv("LICENSE_KEY") or None,
    )
