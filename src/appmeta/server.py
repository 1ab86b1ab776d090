"""HTTP 服务器 - 应用元数据的提交与查询接口"""

import argparse
import asyncio
import logging
from collections.abc import Mapping

from aiohttp import web
from rusty_results.prelude import Err, Ok

from .codec import decode_app, encode_apps
from .config import DEFAULT_ADDRESS
from .core.matcher import (
    Matcher,
    match_any,
    match_description_contains,
    match_exact_title,
    match_exact_version,
    match_title_similar,
)
from .core.registry import AppRegistry
from .core.store import AppStore
from .logger import logger, setup_logger

TEXT_CONTENT_TYPE = "application/text"
YAML_CONTENT_TYPE = "application/yaml"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL", "DISABLE")


def matcher_from_params(params: Mapping[str, str]) -> Matcher:
    """根据查询参数构造匹配器（缺失或为空的参数不做限制）"""
    m = match_any

    if s := params.get("title", ""):
        m = m.and_(match_exact_title(s))

    if s := params.get("version", ""):
        m = m.and_(match_exact_version(s))

    if s := params.get("descriptionContains", ""):
        m = m.and_(match_description_contains(s))

    if s := params.get("titleSimilar", ""):
        m = m.and_(match_title_similar(s))

    return m


def parse_address(address: str) -> tuple[str, int]:
    """解析监听地址（`:8000` 表示监听所有网卡）"""
    host, sep, port = address.rpartition(":")
    if not sep or not port.isdigit():
        raise ValueError(f"Invalid listen address: {address!r}")
    return host.strip("[]") or "0.0.0.0", int(port)


class RegistryServer:
    """应用元数据服务器"""

    def __init__(self, store: AppStore):
        self.registry = AppRegistry(store)

    async def handle_post_app(self, request: web.Request) -> web.Response:
        """写入一条应用元数据记录（请求体中有多个 YAML 文档时只处理第一个）"""
        try:
            body = await request.read()

            match decode_app(body):
                case Err(hint):
                    return web.Response(
                        status=400, text=hint.message, content_type=TEXT_CONTENT_TYPE
                    )
                case Ok(app):
                    pass

            match self.registry.submit(app):
                case Err(errs):
                    return web.Response(
                        status=400, text=errs.error(), content_type=TEXT_CONTENT_TYPE
                    )

            return web.Response(text="OK", content_type=TEXT_CONTENT_TYPE)

        except Exception as e:
            logger.error(f"Insert failed: {e}", exc_info=True)
            return web.Response(status=500, text=str(e), content_type=TEXT_CONTENT_TYPE)

    async def handle_get_apps(self, request: web.Request) -> web.Response:
        """按查询参数搜索应用元数据记录"""
        try:
            matcher = matcher_from_params(request.query)
            apps = self.registry.search(matcher)
            return web.Response(text=encode_apps(apps), content_type=YAML_CONTENT_TYPE)

        except Exception as e:
            logger.error(f"Search failed: {e}", exc_info=True)
            return web.Response(status=500, text=str(e), content_type=TEXT_CONTENT_TYPE)

    async def handle_health(self, request: web.Request) -> web.Response:
        """健康检查"""
        return web.json_response(
            {
                "status": "healthy",
                "apps": len(self.registry.store),
            }
        )

    def _log_level_payload(self) -> dict:
        level = logger.level
        name = "DISABLE" if level > logging.CRITICAL else logging.getLevelName(level)
        return {"logger": logger.name, "level": name}

    async def handle_get_log_level(self, request: web.Request) -> web.Response:
        """查看 appmeta logger 当前级别"""
        return web.json_response(self._log_level_payload())

    async def handle_set_log_level(self, request: web.Request) -> web.Response:
        """调整 appmeta logger 级别，请求体为 `{"level": "<LEVEL>"}`"""
        try:
            data = await request.json()
        except ValueError:
            return web.json_response({"error": "request body must be JSON"}, status=400)

        level = str(data.get("level", "")).upper() if isinstance(data, dict) else ""
        if level not in LOG_LEVELS:
            return web.json_response(
                {"error": f"unknown level {level!r}", "levels": list(LOG_LEVELS)},
                status=400,
            )

        # DISABLE 高于所有级别
        logger.setLevel(logging.CRITICAL + 1 if level == "DISABLE" else getattr(logging, level))
        logger.info(f"[Server:LogLevel] Set to {level}")
        return web.json_response(self._log_level_payload())

    def create_app(self) -> web.Application:
        """创建 aiohttp 应用"""
        app = web.Application()
        app.router.add_post("/apps", self.handle_post_app)
        app.router.add_get("/apps", self.handle_get_apps)
        app.router.add_get("/health", self.handle_health)
        app.router.add_get("/log_level", self.handle_get_log_level)
        app.router.add_post("/log_level", self.handle_set_log_level)
        return app

    async def run(self, host: str, port: int):
        """启动并运行服务器（阻塞直到被取消）"""
        runner = web.AppRunner(self.create_app())
        await runner.setup()

        try:
            site = web.TCPSite(runner, host, port)
            await site.start()
            logger.info(f"Server started on {host}:{port}")

            await asyncio.Event().wait()
        finally:
            logger.info("Shutting down gracefully...")
            await runner.cleanup()


def main():
    """服务器入口"""
    parser = argparse.ArgumentParser(description="App Metadata Registry Server")
    parser.add_argument(
        "-a",
        "--address",
        default=DEFAULT_ADDRESS,
        help=f"监听地址（默认：{DEFAULT_ADDRESS}）",
    )
    args = parser.parse_args()
    setup_logger()

    try:
        host, port = parse_address(args.address)
    except ValueError as e:
        parser.error(str(e))

    logger.info(f"Starting server on {args.address}")
    server = RegistryServer(AppStore())

    try:
        asyncio.run(server.run(host, port))
    except KeyboardInterrupt:
        pass


if __name__ == "__main__":
    main()
