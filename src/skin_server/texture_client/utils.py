# -*- coding: utf-8 -*-
"""
材质客户端的工具函数
"""
from ..errors import RejectedIdentifier

IMAGE_EXTENSION = ".png"
FORBIDDEN_SEQUENCE = "../"


def validate_identifier(identifier: str) -> str:
    """
    校验用户名，仅拒绝包含 "../" 的输入，不做任何规范化。
    """
    if FORBIDDEN_SEQUENCE in identifier:
        raise RejectedIdentifier()
    return identifier


def normalize_filename(identifier: str) -> str:
    """补全 .png 扩展名；已带扩展名的保持不变"""
    if identifier.endswith(IMAGE_EXTENSION):
        return identifier
    return identifier + IMAGE_EXTENSION
