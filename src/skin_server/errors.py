# -*- coding: utf-8 -*-
"""
请求级错误类型

每个错误都携带 HTTP 状态码与面向调用方的纯文本消息，由 main.py 中注册的异常处理器转换为响应。
"""
from typing import Optional


class TextureError(Exception):
    code = 500
    message = "Internal error"

    def __init__(self, message: Optional[str] = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class RejectedIdentifier(TextureError):
    code = 403
    message = "forbidden username provided"


class AssetNotFound(TextureError):
    code = 404

    def __init__(self, reason):
        super().__init__(f"File not found: {reason}")


class UpstreamFailure(TextureError):
    code = 502

    def __init__(self, reason):
        super().__init__(f"Upstream request failed: {reason}")
