"""
代码编写智能体

职责：
  - 根据 Figma 布局 JSON、项目组件清单和 Tailwind 提示生成 JSX
  - 只允许使用 Tailwind 工具类，禁止任何其它样式手段
  - 只输出代码，不输出解释

输出的可靠性不依赖提示词，最终由 workflow.markup_validator 把关。
"""
from autogen_agentchat.agents import AssistantAgent
from autogen_core.models import ChatCompletionClient

SYSTEM_MESSAGE = """你是一名资深前端工程师。

━━━━━━━━━━━━━━━━━━━━
强制规则
━━━━━━━━━━━━━━━━━━━━
- 只使用 Tailwind CSS 工具类（className 中只能出现以空格分隔的工具类）
- 禁止内联样式（style 属性）、<style> 标签、CSS 文件 / CSS Modules 引入
- 禁止 styled-components、emotion、makeStyles 等 CSS-in-JS 方案
- 优先复用项目中已有的组件
- 只输出 JSX 代码
- 不要输出注释或任何解释说明
"""


def create_code_writer(model_client: ChatCompletionClient) -> AssistantAgent:
    """创建代码编写智能体。

    Args:
        model_client: LLM 客户端（OpenAI / Anthropic 均可）

    Returns:
        配置好的 AssistantAgent
    """
    return AssistantAgent(
        name="code_writer",
        description="前端代码编写专家，根据 Figma 布局生成只使用 Tailwind 工具类的 JSX。",
        model_client=model_client,
        system_message=SYSTEM_MESSAGE,
    )
