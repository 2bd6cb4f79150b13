# -*- coding: utf-8 -*-

"""
通用数据模型（schemas）

文件功能:
    - 定义跨模块使用的枚举与数据结构。

公开接口:
    - 枚举 AssetKind: 资源类型（皮肤 / 披风），决定本地子目录与路由前缀。
    - 枚举 Strategy: 资源获取策略（远程 / 本地文件）。
    - 类 ResolvedSource: 一次请求解析得到的字节流来源。
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterator


class AssetKind(str, Enum):
    """资源类型"""
    SKIN = "skin"
    CLOAK = "cloak"

    @property
    def subdirectory(self) -> str:
        return {AssetKind.SKIN: "skins", AssetKind.CLOAK: "cloaks"}[self]

    @property
    def route_prefix(self) -> str:
        return {AssetKind.SKIN: "MinecraftSkins", AssetKind.CLOAK: "MinecraftCloaks"}[self]


class Strategy(str, Enum):
    """资源获取策略"""
    REMOTE = "remote"
    LOCAL_FILE = "local_file"


@dataclass
class ResolvedSource:
    """解析结果：使用的策略、来源描述（URL 或路径）以及响应体字节块迭代器"""
    strategy: Strategy
    origin: str
    chunks: Iterator[bytes]
