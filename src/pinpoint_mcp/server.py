#!/usr/bin/env python3
"""
Pinpoint MCP Server

A Model Context Protocol (MCP) server for the Pinpoint recruiting API. Provides
tools to list and inspect jobs and applications, submit applications and read
candidate CVs, plus prompts for common recruiting reports.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncContextManager, AsyncIterator, Callable

from dotenv import load_dotenv
from mcp.server.fastmcp import FastMCP

from .client import PinpointClient
from .config import ConfigError, PinpointConfig
from .prompts import register_prompts
from .tools import register_tools

logger = logging.getLogger(__name__)

SERVER_NAME = "pinpoint-mcp-server"
SERVER_INSTRUCTIONS = (
    "Tools for the Pinpoint recruiting platform. Use get-jobs / get-job to find positions, "
    "get-applications / get-application-by-id to review candidates, parse-cv-from-url to read "
    "an attached CV, and create-application to submit a new candidate for a job."
)


def client_lifespan(client: PinpointClient) -> Callable[[FastMCP], AsyncContextManager[None]]:
    """Server lifespan that closes the client's HTTP session on shutdown"""

    @asynccontextmanager
    async def lifespan(server: FastMCP) -> AsyncIterator[None]:
        try:
            yield
        finally:
            await client.close()

    return lifespan


def create_server(client: PinpointClient) -> FastMCP:
    """Create the FastMCP app with every tool and prompt registered"""
    mcp = FastMCP(SERVER_NAME, instructions=SERVER_INSTRUCTIONS, lifespan=client_lifespan(client))

    register_tools(mcp, client)
    register_prompts(mcp)

    return mcp


def load_config() -> PinpointConfig:
    """Load configuration, seeding the environment from a .env file if present"""
    load_dotenv()
    return PinpointConfig.from_env()


def main_sync() -> None:
    """Console script entry point: serve over stdio until the transport closes"""
    try:
        config = load_config()
    except ConfigError as e:
        logging.basicConfig(level=logging.INFO)
        logger.error(f"Invalid configuration: {e}")
        raise SystemExit(1) from e

    logging.basicConfig(level=getattr(logging, config.log_level, logging.INFO))

    mcp = create_server(PinpointClient(config))
    try:
        # Let FastMCP handle the event loop
        mcp.run(transport="stdio")
    except KeyboardInterrupt:
        logger.info("Server shutdown requested")
    except Exception as e:
        logger.error(f"Server error: {e}")
        raise


if __name__ == "__main__":
    main_sync()
