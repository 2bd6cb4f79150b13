# -*- coding: utf-8 -*-
"""
读取本地 assets 目录下的皮肤 / 披风文件
"""
import os
from pathlib import Path
from typing import BinaryIO, Iterator

from loguru import logger

from ..errors import AssetNotFound, RejectedIdentifier
from ..schemas import AssetKind
from ..service.paths import get_asset_kind_dir
from .utils import normalize_filename

CHUNK_SIZE = 64 * 1024


def local_path(assets_dir: str, kind: AssetKind, identifier: str) -> Path:
    """
    计算 assets/<skins|cloaks>/<identifier>[.png]。

    结果必须位于对应类型的目录内，否则视为非法用户名。
    """
    kind_dir = get_asset_kind_dir(assets_dir, kind)
    # 与字符串拼接一致: "/alice" 仍落在 kind_dir 下
    path = kind_dir / normalize_filename(identifier).lstrip("/")
    # 只做词法规范化，不跟随符号链接
    if not os.path.normpath(path).startswith(os.path.join(os.path.normpath(kind_dir), "")):
        raise RejectedIdentifier()
    return path


def iter_chunks(f: BinaryIO, chunk_size: int = CHUNK_SIZE) -> Iterator[bytes]:
    """按块读取已打开的文件，读完或消费方提前结束时关闭文件"""
    try:
        while True:
            chunk = f.read(chunk_size)
            if not chunk:
                break
            yield chunk
    finally:
        f.close()


def open_local(path: Path) -> tuple[Path, Iterator[bytes]]:
    """
    打开本地文件并返回 (路径, 字节块迭代器)，不会一次性读入整个文件。

    :raises AssetNotFound: 文件不存在、无权限或其它 I/O 错误
    """
    logger.info(f"Reading {path}")
    try:
        f = open(path, "rb")
    except OSError as e:
        logger.warning(f"读取本地材质失败: {e}")
        raise AssetNotFound(e) from e
    return path, iter_chunks(f)
