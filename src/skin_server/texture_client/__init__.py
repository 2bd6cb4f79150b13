# -*- coding: utf-8 -*-
"""
材质获取客户端

负责从远程材质服务下载，或从本地 assets 目录读取皮肤与披风。

公开接口:
    - 类 TextureClient
        - 方法: fetch_remote(identifier) -> bytes
        - 方法: local_path(kind, identifier) -> Path
        - 方法: open_local(kind, identifier) -> tuple[Path, Iterator[bytes]]
    - validate_identifier(identifier) -> str
"""
from pathlib import Path
from typing import Iterator, Optional

from ..schemas import AssetKind
from .local import local_path as local_path_func, open_local as open_local_func
from .remote import fetch_remote as fetch_remote_func
from .utils import normalize_filename, validate_identifier

__all__ = ["TextureClient", "normalize_filename", "validate_identifier"]


class TextureClient:
    """封装了远程下载与本地读取逻辑的客户端"""

    def __init__(self, upstream_url: str, assets_dir: str, timeout: Optional[float] = None):
        self.upstream_url = upstream_url
        self.assets_dir = assets_dir
        self.timeout = timeout

    def fetch_remote(self, identifier: str) -> bytes:
        return fetch_remote_func(self.upstream_url, identifier, self.timeout)

    def local_path(self, kind: AssetKind, identifier: str) -> Path:
        return local_path_func(self.assets_dir, kind, identifier)

    def open_local(self, kind: AssetKind, identifier: str) -> tuple[Path, Iterator[bytes]]:
        return open_local_func(self.local_path(kind, identifier))
