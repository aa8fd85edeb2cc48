"""
JSX 输出校验器 — Tailwind-only 约束的实际执行者

按固定顺序检查，遇到第一条违规立即抛出对应的 ValidationRejected 子类：
  1. 输出为空
  2. 不含任何 JSX 元素
  3. 内联样式对象      style={{ ... }}
  4. 内联样式字符串    style="..."
  5. <style> 标签
  6. CSS-in-JS         styled.div / styled(...) / css`` / @emotion / makeStyles
  7. class 值含 CSS 语法（冒号 / 分号）
  8. 引入 .css 文件（含 import x from "a.css"，CSS Modules 除外）
  9. 引入 CSS Modules
 10. require() 引入 .css
"""
import re
from typing import List, Tuple, Type

from utils.errors import ValidationRejected


class EmptyOutput(ValidationRejected):
    rule = "empty_output"


class NoMarkupElements(ValidationRejected):
    rule = "no_markup_elements"


class InlineStyleObject(ValidationRejected):
    rule = "inline_style_object"


class InlineStyleString(ValidationRejected):
    rule = "inline_style_string"


class StyleBlock(ValidationRejected):
    rule = "style_block"


class CssInJs(ValidationRejected):
    rule = "css_in_js"


class CssInClassName(ValidationRejected):
    rule = "css_in_class_name"


class StylesheetImport(ValidationRejected):
    rule = "stylesheet_import"


class CssModuleImport(ValidationRejected):
    rule = "css_module_import"


class StylesheetRequire(ValidationRejected):
    rule = "stylesheet_require"


_ELEMENT_RE = re.compile(r"<[a-zA-Z][a-zA-Z0-9]*(\s|>|/)")
_CLASS_ATTR_RE = re.compile(
    r"""\b(?:className|class)\s*=\s*(?:"([^"]*)"|'([^']*)'|\{\s*["'`]([^"'`]*)["'`]\s*\})"""
)

# (正则, 异常类型, 说明)
_PATTERN_RULES: List[Tuple["re.Pattern[str]", Type[ValidationRejected], str]] = [
    (
        re.compile(r"\bstyle\s*=\s*\{"),
        InlineStyleObject,
        "Output contains inline styles (style={{ }}). Only Tailwind CSS classes are allowed.",
    ),
    (
        re.compile(r"""\bstyle\s*=\s*["'][^"']*["']"""),
        InlineStyleString,
        'Output contains inline style strings (style="..."). Only Tailwind CSS classes are allowed.',
    ),
    (
        re.compile(r"<style[^>]*>[\s\S]*?</style>", re.IGNORECASE),
        StyleBlock,
        "Output contains <style> tags. Only Tailwind CSS classes are allowed.",
    ),
    (
        re.compile(r"styled\.[a-zA-Z]+|styled\(|css\s*`|@emotion|makeStyles|createGlobalStyle"),
        CssInJs,
        "Output contains CSS-in-JS patterns. Only Tailwind CSS classes are allowed.",
    ),
]

_IMPORT_RULES: List[Tuple["re.Pattern[str]", Type[ValidationRejected], str]] = [
    (
        re.compile(r"""import\s+(?:[\s\S]*?\s+from\s+)?['"][^'"]*(?<!\.module)\.css['"]"""),
        StylesheetImport,
        "Output contains CSS imports. Only Tailwind CSS classes are allowed.",
    ),
    (
        re.compile(r"""import\s+[\s\S]*?\s+from\s+['"][^'"]*\.module\.css['"]"""),
        CssModuleImport,
        "Output contains CSS modules. Only Tailwind CSS classes are allowed.",
    ),
    (
        re.compile(r"""require\s*\(\s*['"][^'"]*\.css['"]\s*\)"""),
        StylesheetRequire,
        "Output contains require() CSS imports. Only Tailwind CSS classes are allowed.",
    ),
]


def validate_markup(code: str) -> str:
    """校验 JSX 输出，全部通过时返回去除首尾空白的代码。

    Raises:
        ValidationRejected: 具体子类标明违反的规则
    """
    trimmed = (code or "").strip()

    if not trimmed:
        raise EmptyOutput("Output is empty. JSX code is required.")

    if not _ELEMENT_RE.search(trimmed):
        raise NoMarkupElements("Output does not contain valid JSX code. Expected JSX elements.")

    for pattern, error_cls, detail in _PATTERN_RULES:
        if pattern.search(trimmed):
            raise error_cls(detail)

    for match in _CLASS_ATTR_RE.finditer(trimmed):
        value = next(group for group in match.groups() if group is not None)
        if ":" in value or ";" in value:
            raise CssInClassName(
                f"Output contains CSS-like syntax in className ({value!r}). "
                "Only Tailwind utility classes are allowed."
            )

    for pattern, error_cls, detail in _IMPORT_RULES:
        if pattern.search(trimmed):
            raise error_cls(detail)

    return trimmed
