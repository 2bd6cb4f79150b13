# -*- coding: utf-8 -*-
"""
皮肤服务器 HTTP 入口

文件功能:
    - 提供基于 FastAPI 的材质服务，按配置的获取方式返回 Minecraft 皮肤与披风。

公开接口:
    - GET /: 固定问候语。
    - GET /MinecraftSkins/{username}: 获取皮肤。
    - GET /MinecraftCloaks/{username}: 获取披风。
    - create_app(settings) -> FastAPI
    - main(argv=None): 解析命令行并启动 uvicorn。
"""

from typing import Optional, Sequence

from fastapi import Depends, FastAPI, Request
from loguru import logger
from starlette.responses import PlainTextResponse, StreamingResponse

from . import __version__
from .config import Settings, parse_settings
from .errors import TextureError
from .log import setup_logging
from .schemas import AssetKind
from .service.resolver import TextureResolver

GREETING = "Hello, World!"


def get_resolver(request: Request) -> TextureResolver:
    return request.app.state.resolver


async def texture_error_handler(request: Request, exc: TextureError) -> PlainTextResponse:
    if exc.code >= 500:
        logger.error(f"{request.url.path}: {exc.message}")
    else:
        logger.warning(f"{request.url.path}: {exc.message}")
    return PlainTextResponse(exc.message, status_code=exc.code)


async def root() -> PlainTextResponse:
    return PlainTextResponse(GREETING)


def make_texture_handler(kind: AssetKind):
    """为某一资源类型生成路由处理函数，皮肤与披风共用同一套流程"""

    async def handler(username: str, resolver: TextureResolver = Depends(get_resolver)):
        source = await resolver.resolve(kind, username)
        return StreamingResponse(source.chunks)

    handler.__name__ = f"get_{kind.value}"
    return handler


def create_app(settings: Settings, resolver: Optional[TextureResolver] = None) -> FastAPI:
    """构建应用；settings 只在此处注入一次，请求处理过程中不再重新解析"""
    app = FastAPI(
        title="Minecraft Skin Server",
        description="按配置从 mc-heads.net 或本地目录提供皮肤与披风",
        version=__version__,
    )
    app.state.resolver = resolver or TextureResolver(settings)
    app.add_exception_handler(TextureError, texture_error_handler)

    logger.info("Registering routes")
    app.add_api_route("/", root, methods=["GET"], response_class=PlainTextResponse)
    for kind in AssetKind:
        app.add_api_route(
            f"/{kind.route_prefix}/{{username:path}}",
            make_texture_handler(kind),
            methods=["GET"],
            summary=f"获取{'皮肤' if kind is AssetKind.SKIN else '披风'}",
        )
    return app


def main(argv: Optional[Sequence[str]] = None) -> None:
    import uvicorn

    settings = parse_settings(argv)
    setup_logging(settings.log_level)
    logger.info(f"Obtaining method: {settings.obtaining_method.value}")
    app = create_app(settings)
    logger.info(f"Listening on {settings.host}:{settings.port}")
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
