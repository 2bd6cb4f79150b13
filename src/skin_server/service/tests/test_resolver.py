# -*- coding: utf-8 -*-

"""
测试材质解析器

验证策略选择表以及 TextureResolver 对校验、远程、本地三条路径的调度。
"""

import asyncio
from pathlib import Path

import pytest

from skin_server.config import ObtainingMethod, Settings
from skin_server.errors import AssetNotFound, RejectedIdentifier, TextureError, UpstreamFailure
from skin_server.schemas import AssetKind, Strategy
from skin_server.service.paths import get_asset_kind_dir
from skin_server.service.resolver import TextureResolver, select_strategy

R = Strategy.REMOTE
L = Strategy.LOCAL_FILE


@pytest.mark.parametrize(
    "kind, method, expected",
    [
        (AssetKind.SKIN, ObtainingMethod.LICENSE, R),
        (AssetKind.SKIN, ObtainingMethod.LOCAL, L),
        (AssetKind.SKIN, ObtainingMethod.SKINS_LICENSE, R),
        (AssetKind.SKIN, ObtainingMethod.CLOAKS_LICENSE, L),
        (AssetKind.CLOAK, ObtainingMethod.LICENSE, R),
        (AssetKind.CLOAK, ObtainingMethod.LOCAL, L),
        (AssetKind.CLOAK, ObtainingMethod.SKINS_LICENSE, L),
        (AssetKind.CLOAK, ObtainingMethod.CLOAKS_LICENSE, R),
    ],
)
def test_select_strategy_table(kind, method, expected):
    assert select_strategy(kind, method) is expected


class SpyClient:
    """记录调用的假客户端"""

    def __init__(self, remote_error=None, local_error=None):
        self.calls = []
        self.remote_error = remote_error
        self.local_error = local_error

    def fetch_remote(self, identifier):
        self.calls.append(("remote", identifier))
        if self.remote_error:
            raise self.remote_error
        return b"remote-bytes"

    def local_path(self, kind, identifier):
        return Path("assets") / kind.subdirectory / f"{identifier}.png"

    def open_local(self, kind, identifier):
        self.calls.append(("local", kind, identifier))
        if self.local_error:
            raise self.local_error
        return self.local_path(kind, identifier), iter([b"local-", b"bytes"])


def make_resolver(method, client):
    return TextureResolver(Settings(obtaining_method=method), client=client)


def test_resolve_remote_wraps_bytes_as_single_chunk():
    client = SpyClient()
    source = asyncio.run(make_resolver(ObtainingMethod.LICENSE, client).resolve(AssetKind.CLOAK, "bob"))
    assert source.strategy is Strategy.REMOTE
    assert source.origin == "https://mc-heads.net/download/bob"
    assert b"".join(source.chunks) == b"remote-bytes"
    assert client.calls == [("remote", "bob")]


def test_resolve_local_streams_chunks():
    client = SpyClient()
    source = asyncio.run(make_resolver(ObtainingMethod.LOCAL, client).resolve(AssetKind.SKIN, "alice"))
    assert source.strategy is Strategy.LOCAL_FILE
    assert source.origin == str(Path("assets") / "skins" / "alice.png")
    assert b"".join(source.chunks) == b"local-bytes"
    assert client.calls == [("local", AssetKind.SKIN, "alice")]


def test_resolve_local_computes_path_only_inside_open_local():
    class PathlessClient(SpyClient):
        def local_path(self, kind, identifier):
            raise AssertionError("path must come from open_local")

        def open_local(self, kind, identifier):
            self.calls.append(("local", kind, identifier))
            return Path("assets") / "cloaks" / "bob.png", iter([b"cloak"])

    client = PathlessClient()
    source = asyncio.run(make_resolver(ObtainingMethod.LOCAL, client).resolve(AssetKind.CLOAK, "bob"))
    assert source.origin == str(Path("assets") / "cloaks" / "bob.png")
    assert b"".join(source.chunks) == b"cloak"


@pytest.mark.parametrize("identifier", ["../alice", "a/../b", "x../"])
def test_rejected_identifier_touches_nothing(identifier):
    client = SpyClient()
    resolver = make_resolver(ObtainingMethod.SKINS_LICENSE, client)
    for kind in AssetKind:
        with pytest.raises(RejectedIdentifier):
            asyncio.run(resolver.resolve(kind, identifier))
    assert client.calls == []


def test_identifier_check_is_case_and_sequence_exact():
    client = SpyClient()
    resolver = make_resolver(ObtainingMethod.LOCAL, client)
    # 只拒绝字面量 "../"
    for identifier in ("..", "..\\alice", "alice..", ".hidden"):
        asyncio.run(resolver.resolve(AssetKind.SKIN, identifier))
    assert len(client.calls) == 4


def test_errors_propagate_from_client():
    resolver = make_resolver(ObtainingMethod.CLOAKS_LICENSE, SpyClient(
        remote_error=UpstreamFailure("timeout"),
        local_error=AssetNotFound("missing"),
    ))
    with pytest.raises(UpstreamFailure):
        asyncio.run(resolver.resolve(AssetKind.CLOAK, "bob"))
    with pytest.raises(AssetNotFound) as excinfo:
        asyncio.run(resolver.resolve(AssetKind.SKIN, "bob"))
    assert excinfo.value.message == "File not found: missing"
    assert excinfo.value.code == 404


def test_settings_are_immutable():
    settings = Settings(obtaining_method=ObtainingMethod.LOCAL)
    with pytest.raises(Exception):
        settings.obtaining_method = ObtainingMethod.LICENSE


def test_assets_layout_relative_to_cwd(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert get_asset_kind_dir("assets", AssetKind.SKIN) == tmp_path / "assets" / "skins"
    assert get_asset_kind_dir(str(tmp_path), AssetKind.CLOAK) == tmp_path / "cloaks"


def test_texture_error_message_defaults():
    assert TextureError().message == "Internal error"
    assert TextureError(None).code == 500
    assert TextureError("boom").message == "boom"
    assert RejectedIdentifier().message == "forbidden username provided"
    assert str(UpstreamFailure("timeout")) == "Upstream request failed: timeout"
