"""
Figma 设计稿 → Tailwind JSX 组件 — 命令行入口

用法：
    python main.py <Figma 链接或 file key> [--project 目标项目目录]
    python main.py                         # 交互式输入链接

生成结果写入目标项目的 components/（或 pages/）目录，已存在的文件绝不覆盖。
"""
import argparse
import asyncio
import logging
import os
import sys

# 将项目根目录添加到 Python 路径
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from config.settings import load_run_settings
from messages.workflow_messages import RunStatus
from tools.file_tools import scratch_janitor
from ui.console import ConsoleHost
from workflow.orchestrator import run_generation

# ============================================================
# 日志配置
# ============================================================
logging.basicConfig(
    level=logging.WARNING,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)


async def run_cli(args: argparse.Namespace, host: ConsoleHost) -> int:
    """CLI 模式入口，返回进程退出码。"""
    reference = args.reference or await host.ask_reference()
    if not reference:
        host.info("未输入 Figma 链接，已取消。")
        return 0

    project_root = os.path.abspath(args.project)
    run_settings = load_run_settings(ai_provider=args.provider, ai_model=args.model)

    print()
    print("=" * 60)
    print("  Figma 设计稿 → Tailwind JSX")
    print("=" * 60)
    print(f"  设计稿   : {reference}")
    print(f"  目标项目 : {project_root}")
    print(f"  AI 服务  : {run_settings.ai_provider} / {run_settings.model_name}")
    print("=" * 60)

    try:
        outcome = await run_generation(
            reference,
            project_root,
            host,
            run_settings=run_settings,
            file_name=args.name,
            show_diff=args.preview,
        )
    finally:
        scratch_janitor.flush()

    if outcome.status is RunStatus.FAILED:
        host.error(outcome.remediation)
        return 1
    if outcome.status is RunStatus.CANCELLED:
        host.info("已取消，未写入任何文件。")
    return 0


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Figma 设计稿 → Tailwind JSX 组件",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "示例:\n"
            "  python main.py https://www.figma.com/design/abc123/Page?node-id=1-2\n"
            "  python main.py abc123 --project ../my-app --preview\n"
        ),
    )
    parser.add_argument("reference", nargs="?", help="Figma 文件链接或 file key（省略时交互输入）")
    parser.add_argument("--project", default=os.getcwd(), help="目标项目根目录 (默认当前目录)")
    parser.add_argument("--name", help="生成的文件名 (默认由节点名称生成)")
    parser.add_argument("--preview", action="store_true", help="写入前展示差异预览")
    parser.add_argument("--provider", choices=["openai", "anthropic"], help="AI 服务商 (默认读取 AI_PROVIDER)")
    parser.add_argument("--model", help="模型名称 (默认读取 AI_MODEL)")
    parser.add_argument("--verbose", action="store_true", help="输出调试日志")

    args = parser.parse_args()
    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    host = ConsoleHost()
    try:
        exit_code = asyncio.run(run_cli(args, host))
    except KeyboardInterrupt:
        print("\n\n[中断] 用户取消了操作。")
        exit_code = 130
    except Exception as e:
        host.error(f"工作流异常: {type(e).__name__}: {e}")
        exit_code = 1
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
