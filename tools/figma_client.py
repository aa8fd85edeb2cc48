"""
Figma REST 客户端

只负责拉取布局树（原始 JSON），不做任何解析：
  - 有 node_id: GET /v1/files/:file_key/nodes?ids=:node_ids
  - 无 node_id: GET /v1/files/:file_key

需要配置 FIGMA_TOKEN 环境变量或由调用方传入 token。
"""
import logging
import os
from typing import Any, Dict, Optional

import httpx

from config import settings
from utils.errors import MissingCredential, ServiceError

logger = logging.getLogger(__name__)


def resolve_token(token: Optional[str] = None) -> str:
    """调用方配置优先，其次 FIGMA_TOKEN 环境变量。

    Raises:
        MissingCredential: 两处均未配置
    """
    token = token or os.getenv("FIGMA_TOKEN")
    if not token:
        raise MissingCredential(
            "FIGMA_TOKEN",
            "未配置 Figma API token！\n"
            "请设置环境变量 FIGMA_TOKEN 或在 .env 中配置。\n"
            f"获取方式: {settings.FIGMA_TOKEN_HELP_URL}",
        )
    return token


async def fetch_layout(
    document_id: str,
    node_id: Optional[str] = None,
    token: Optional[str] = None,
    http_client: Optional[httpx.AsyncClient] = None,
) -> Dict[str, Any]:
    """拉取 Figma 布局树。

    Args:
        document_id: Figma file key
        node_id: 节点 ID（如 '1:2'），为空时拉取整个文件
        token: Figma API token，为空时读取 FIGMA_TOKEN
        http_client: 可选的共享 httpx 客户端

    Returns:
        Figma API 返回的原始 JSON

    Raises:
        MissingCredential: 未配置 token（不会发起任何请求）
        ServiceError: 非 2xx 响应、网络异常或响应无法解析
    """
    token = resolve_token(token)
    headers = {"X-Figma-Token": token}

    if node_id:
        # Figma 节点 ID 使用冒号分隔（如 1:2），请求参数统一为连字符（如 1-2）
        url = f"{settings.FIGMA_API_BASE}/files/{document_id}/nodes"
        params: Optional[Dict[str, str]] = {"ids": node_id.replace(":", "-")}
    else:
        url = f"{settings.FIGMA_API_BASE}/files/{document_id}"
        params = None

    logger.info("拉取 Figma 布局: file=%s node=%s", document_id, node_id)
    try:
        if http_client is None:
            async with httpx.AsyncClient(timeout=settings.FIGMA_REQUEST_TIMEOUT) as client:
                response = await client.get(url, params=params, headers=headers)
        else:
            response = await http_client.get(url, params=params, headers=headers)
    except httpx.HTTPError as e:
        raise ServiceError("Figma", f"{type(e).__name__}: {e}") from e

    if response.is_error:
        raise ServiceError("Figma", _error_message(response), status=response.status_code)

    try:
        return response.json()
    except ValueError as e:
        raise ServiceError("Figma", f"响应不是合法的 JSON: {e}", status=response.status_code) from e


def _error_message(response: httpx.Response) -> str:
    """优先使用 Figma 返回的 err / message 字段。"""
    try:
        body = response.json()
    except ValueError:
        body = None
    if isinstance(body, dict):
        message = body.get("err") or body.get("message")
        if message:
            return str(message)
    return response.reason_phrase or "Unknown error"
