# -*- coding: utf-8 -*-
"""
从远程材质服务 (mc-heads.net) 下载皮肤 / 披风
"""
from typing import Optional

import requests
from loguru import logger
from requests.exceptions import RequestException

from ..errors import UpstreamFailure


def build_remote_url(url_template: str, identifier: str) -> str:
    # 用户名原样作为一个路径段交给上游
    return url_template.replace("{username}", identifier)


def fetch_remote(url_template: str, identifier: str, timeout: Optional[float] = None) -> bytes:
    """
    向上游发起 GET 请求并返回完整响应体。

    :param url_template: 含 {username} 占位符的 URL 模板
    :param identifier: 已通过校验的用户名
    :param timeout: 请求超时（秒），None 表示不限制
    :return: 图片字节
    :raises UpstreamFailure: 网络错误或非 2xx 状态码
    """
    url = build_remote_url(url_template, identifier)
    logger.info(f"Sending request to {url}")
    try:
        response = requests.get(url, timeout=timeout)
        response.raise_for_status()
        return response.content
    except RequestException as e:
        logger.error(f"获取远程材质失败: {url}: {e}")
        raise UpstreamFailure(e) from e
