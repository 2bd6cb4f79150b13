# -*- coding: utf-8 -*-
"""
启动配置

文件功能:
    - 定义皮肤获取方式 ObtainingMethod。
    - 解析命令行参数（环境变量提供默认值），生成进程内唯一、不可变的 Settings。

公开接口:
    - 枚举 ObtainingMethod
    - 类 Settings(BaseModel): 冻结的配置对象
    - build_parser() -> argparse.ArgumentParser
    - parse_settings(argv=None, environ=None) -> Settings
"""

from __future__ import annotations

import argparse
import os
from enum import Enum
from typing import Mapping, Optional, Sequence

from pydantic import BaseModel, ConfigDict, Field

from . import __version__

DEFAULT_PORT = 3000
DEFAULT_UPSTREAM_URL = "https://mc-heads.net/download/{username}"
DEFAULT_UPSTREAM_TIMEOUT = 30.0
ENV_PREFIX = "SKIN_SERVER_"


class ObtainingMethod(str, Enum):
    """皮肤与披风的获取方式"""
    # 皮肤和披风都从 Minecraft 服务器获取
    LICENSE = "license"
    # 皮肤和披风都使用本地文件
    LOCAL = "local"
    # 仅皮肤从 Minecraft 服务器获取
    SKINS_LICENSE = "skins-license"
    # 仅披风从 Minecraft 服务器获取
    CLOAKS_LICENSE = "cloaks-license"


class Settings(BaseModel):
    """进程级配置，启动时构建一次，之后只读"""
    model_config = ConfigDict(frozen=True)

    obtaining_method: ObtainingMethod
    host: str = "0.0.0.0"
    port: int = Field(default=DEFAULT_PORT, ge=0, le=65535)
    assets_dir: str = "assets"
    upstream_url: str = DEFAULT_UPSTREAM_URL
    upstream_timeout: Optional[float] = DEFAULT_UPSTREAM_TIMEOUT
    log_level: str = "INFO"


def _env(environ: Mapping[str, str], name: str) -> Optional[str]:
    value = environ.get(ENV_PREFIX + name)
    return value if value else None


def build_parser(environ: Optional[Mapping[str, str]] = None) -> argparse.ArgumentParser:
    """构建命令行解析器，环境变量 SKIN_SERVER_* 作为各参数的默认值"""
    environ = os.environ if environ is None else environ
    method_default = _env(environ, "OBTAINING_METHOD")

    parser = argparse.ArgumentParser(
        prog="skin-server",
        description="Minecraft skin and cloak texture server",
    )
    parser.add_argument(
        "-o", "--obtaining-method",
        choices=[m.value for m in ObtainingMethod],
        default=method_default,
        required=method_default is None,
        help="Skin obtaining method",
    )
    parser.add_argument(
        "-p", "--port",
        type=int,
        default=int(_env(environ, "PORT") or DEFAULT_PORT),
        help="HTTP port to listen",
    )
    parser.add_argument("--host", default=_env(environ, "HOST") or "0.0.0.0", help="Address to bind")
    parser.add_argument(
        "--assets-dir",
        default=_env(environ, "ASSETS_DIR") or "assets",
        help="Directory holding skins/ and cloaks/",
    )
    parser.add_argument(
        "--upstream-url",
        default=_env(environ, "UPSTREAM_URL") or DEFAULT_UPSTREAM_URL,
        help="Remote texture URL template, {username} is substituted",
    )
    parser.add_argument(
        "--upstream-timeout",
        type=float,
        default=float(_env(environ, "UPSTREAM_TIMEOUT") or DEFAULT_UPSTREAM_TIMEOUT),
        help="Timeout in seconds for remote requests, 0 disables it",
    )
    parser.add_argument("--log-level", default=_env(environ, "LOG_LEVEL") or "INFO")
    parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def parse_settings(
    argv: Optional[Sequence[str]] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> Settings:
    """解析命令行并返回不可变的 Settings"""
    parser = build_parser(environ)
    args = parser.parse_args(argv)
    if "{username}" not in args.upstream_url:
        parser.error(f"--upstream-url must contain '{{username}}': {args.upstream_url}")
    return Settings(
        obtaining_method=ObtainingMethod(args.obtaining_method),
        host=args.host,
        port=args.port,
        assets_dir=args.assets_dir,
        upstream_url=args.upstream_url,
        upstream_timeout=args.upstream_timeout or None,
        log_level=args.log_level.upper(),
    )
