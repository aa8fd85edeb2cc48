"""终端宿主测试"""
import pytest

from ui.console import ConsoleHost


def make_host(answers=()):
    answers = list(answers)
    printed = []
    host = ConsoleHost(input_func=lambda prompt: answers.pop(0), print_func=printed.append)
    return host, printed


class TestConsoleHost:
    @pytest.mark.asyncio
    @pytest.mark.parametrize("answer, expected", [
        ("y", True), ("YES", True), ("", False), ("n", False), ("sure", False),
    ])
    async def test_confirm(self, answer, expected):
        host, _ = make_host([answer])
        assert await host.confirm("写入?") is expected

    @pytest.mark.asyncio
    async def test_ask_reference_strips(self):
        host, _ = make_host(["  AbC123 \n"])
        assert await host.ask_reference() == "AbC123"

    def test_progress_accumulates(self):
        host, printed = make_host()
        host.progress("a", 30)
        host.progress("b", 90)
        assert printed == ["[ 30%] a", "[100%] b"]

    @pytest.mark.asyncio
    async def test_show_diff(self, tmp_path):
        left = tmp_path / "left.tsx"
        right = tmp_path / "right.tsx"
        left.write_text("", encoding="utf-8")
        right.write_text("<div />\n", encoding="utf-8")
        host, printed = make_host()
        await host.show_diff(left, right, "title")
        assert printed[0] == "━━━━ title ━━━━"
        assert "+<div />" in printed

    def test_notifications(self):
        host, printed = make_host()
        host.info("i")
        host.warn("w")
        host.error("e")
        assert printed == ["[提示] i", "[警告] w", "[错误] e"]

    @pytest.mark.asyncio
    async def test_show_diff_tolerates_undecodable_bytes(self, tmp_path):
        left = tmp_path / "legacy.tsx"
        right = tmp_path / "new.tsx"
        left.write_bytes(b"\xff\xfe legacy\n")
        right.write_text("<div />\n", encoding="utf-8")
        host, printed = make_host()
        await host.show_diff(left, right, "title")
        assert "+<div />" in printed
