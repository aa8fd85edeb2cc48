"""
统一异常体系

所有组件只向编排器抛出以下异常，编排器据此选择给用户的提示：
  - InvalidReference   : 设计稿链接 / file key 无法解析
  - MissingCredential  : 缺少 Figma token 或 AI API key
  - ServiceError       : Figma / AI 服务返回非成功响应或网络异常
  - ValidationRejected : 生成的 JSX 违反了 Tailwind-only 约束
  - AlreadyExists      : 目标文件已存在（绝不覆盖）
  - InvalidFileName    : 文件名会写出目标目录
"""
from typing import Optional


class Figma2TailwindError(Exception):
    """所有业务异常的基类"""


class InvalidReference(Figma2TailwindError):
    """设计稿引用无法解析出 file key。"""

    def __init__(self, reference: str) -> None:
        self.reference = reference
        super().__init__(f"无效的 Figma 链接或 file key: {reference!r}")


class MissingCredential(Figma2TailwindError):
    """必需的凭证未配置。

    setting 为需要配置的环境变量名，用于给用户指出具体配置项。
    """

    def __init__(self, setting: str, message: str) -> None:
        self.setting = setting
        super().__init__(message)


class ServiceError(Figma2TailwindError):
    """上游服务（Figma / AI）调用失败，保留上游状态码和信息。"""

    def __init__(self, service: str, message: str, status: Optional[int] = None) -> None:
        self.service = service
        self.status = status
        self.upstream_message = message
        prefix = f"{service} API 错误"
        if status is not None:
            prefix += f" ({status})"
        super().__init__(f"{prefix}: {message}")


class ValidationRejected(Figma2TailwindError):
    """生成结果未通过校验。子类名即违反的规则。"""

    rule = "unknown"

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"Rejected: {detail}")


class AlreadyExists(Figma2TailwindError):
    """目标文件已存在。"""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"文件已存在: {path}，不会覆盖已有文件。")



class InvalidFileName(Figma2TailwindError):
    """文件名含路径分隔符或指向目标目录之外。"""

    def __init__(self, file_name: str) -> None:
        self.file_name = file_name
        super().__init__(f"无效的文件名: {file_name!r}，只能是目标目录下的单个文件名。")
