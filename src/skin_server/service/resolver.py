# -*- coding: utf-8 -*-

"""
材质解析器

文件功能:
    - 根据配置的获取方式，为每个请求决定从远程服务还是本地文件获取材质，并返回字节流。

公开接口:
    - select_strategy(kind, method) -> Strategy
    - 类 TextureResolver:
        - 方法: resolve(kind, identifier) -> ResolvedSource (协程)

内部方法:
    - _resolve_remote(), _resolve_local()
"""

import asyncio
from typing import Optional

from ..config import ObtainingMethod, Settings
from ..schemas import AssetKind, ResolvedSource, Strategy
from ..texture_client import TextureClient, validate_identifier
from ..texture_client.remote import build_remote_url

_REMOTE_KINDS: dict[ObtainingMethod, frozenset[AssetKind]] = {
    ObtainingMethod.LICENSE: frozenset({AssetKind.SKIN, AssetKind.CLOAK}),
    ObtainingMethod.LOCAL: frozenset(),
    ObtainingMethod.SKINS_LICENSE: frozenset({AssetKind.SKIN}),
    ObtainingMethod.CLOAKS_LICENSE: frozenset({AssetKind.CLOAK}),
}


def select_strategy(kind: AssetKind, method: ObtainingMethod) -> Strategy:
    """由资源类型和获取方式确定获取策略"""
    if kind in _REMOTE_KINDS[method]:
        return Strategy.REMOTE
    return Strategy.LOCAL_FILE


class TextureResolver:
    """每个请求调用一次 resolve，自身不持有可变状态"""

    def __init__(self, settings: Settings, client: Optional[TextureClient] = None):
        self.settings = settings
        self.client = client or TextureClient(
            upstream_url=settings.upstream_url,
            assets_dir=settings.assets_dir,
            timeout=settings.upstream_timeout,
        )

    async def resolve(self, kind: AssetKind, identifier: str) -> ResolvedSource:
        """
        校验 -> 选择策略 -> 获取。

        :raises RejectedIdentifier: 用户名包含 "../"
        :raises AssetNotFound: 本地文件无法打开
        :raises UpstreamFailure: 远程请求失败
        """
        validate_identifier(identifier)
        strategy = select_strategy(kind, self.settings.obtaining_method)
        if strategy is Strategy.REMOTE:
            return await self._resolve_remote(identifier)
        return await self._resolve_local(kind, identifier)

    async def _resolve_remote(self, identifier: str) -> ResolvedSource:
        # requests 为阻塞调用，在线程中执行
        content = await asyncio.to_thread(self.client.fetch_remote, identifier)
        return ResolvedSource(
            strategy=Strategy.REMOTE,
            origin=build_remote_url(self.settings.upstream_url, identifier),
            chunks=iter([content]),
        )

    async def _resolve_local(self, kind: AssetKind, identifier: str) -> ResolvedSource:
        path, chunks = await asyncio.to_thread(self.client.open_local, kind, identifier)
        return ResolvedSource(strategy=Strategy.LOCAL_FILE, origin=str(path), chunks=chunks)
