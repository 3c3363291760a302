"""Run the FastAPI app on one or more listen addresses with uvicorn."""
from __future__ import annotations

import asyncio
import logging
from typing import Sequence

import uvicorn

from imagen.main import app

logger = logging.getLogger(__name__)

DEFAULT_LISTEN = ":3000"


def parse_address(address: str) -> tuple[str, int]:
    """Split ``host:port`` (``:port`` = all interfaces, ``[v6]:port`` allowed)."""

    host, sep, port = address.strip().rpartition(":")
    if not sep or not port.isdigit():
        raise ValueError(f"invalid listen address: {address!r}")
    host = host.strip("[]") or "0.0.0.0"
    return host, int(port)


def split_listen(value: str) -> list[str]:
    return [addr.strip() for addr in value.split(",") if addr.strip()]


def build_servers(addresses: Sequence[str], log_level: str = "info") -> list[uvicorn.Server]:
    servers = []
    for address in addresses or [DEFAULT_LISTEN]:
        host, port = parse_address(address)
        config = uvicorn.Config(app, host=host, port=port, log_level=log_level.lower())
        servers.append(uvicorn.Server(config))
    return servers


async def _serve_all(servers: Sequence[uvicorn.Server]) -> None:
    tasks = [asyncio.create_task(server.serve()) for server in servers]
    done, _ = await asyncio.wait(tasks, return_when=asyncio.FIRST_COMPLETED)
    # first listener to stop (or fail to bind) decides the outcome
    for task in done:
        task.result()


def serve(addresses: Sequence[str], log_level: str = "info") -> None:
    servers = build_servers(addresses, log_level)
    for server in servers:
        logger.info("Starting server on %s:%d", server.config.host, server.config.port)
    asyncio.run(_serve_all(servers))
