"""FastAPI No-AI - Keep AI crawlers out of your FastAPI and Starlette apps.

FastAPI No-AI provides an ASGI middleware that answers requests from known AI
training and content-harvesting crawlers with a permanent redirect, and a
robots.txt generator disallowing the same crawlers.

Key Components:
    - NoAIMiddleware: ASGI middleware doing the user-agent check
    - NoAILayer: Configures the middleware and wraps or installs it
    - bot_blocking_robots_txt: robots.txt text for all known AI crawlers
    - AI_AGENTS: The user-agent substrings that are redirected

Usage:
    ```python
    from fastapi import FastAPI
    from fastapi_no_ai import NoAIMiddleware, create_robots_txt_router

    app = FastAPI()
    app.add_middleware(NoAIMiddleware, redirect_url="https://example.com/")
    app.include_router(create_robots_txt_router())
    ```
"""

from fastapi_no_ai.consts import AI_AGENTS
from fastapi_no_ai.matching import is_bot, matching_agent
from fastapi_no_ai.middleware import (
    FORWARD,
    Forward,
    NoAIConfig,
    NoAILayer,
    NoAIMiddleware,
    Redirect,
)
from fastapi_no_ai.responses import (
    RedirectConstructionError,
    build_redirect,
    cache_busting_token,
)
from fastapi_no_ai.robots import (
    bot_blocking_robots_txt,
    create_robots_txt_router,
    robots_txt_response,
)

__version__ = "0.1.0"

__all__ = [
    "AI_AGENTS",
    "FORWARD",
    "Forward",
    "NoAIConfig",
    "NoAILayer",
    "NoAIMiddleware",
    "Redirect",
    "RedirectConstructionError",
    "bot_blocking_robots_txt",
    "build_redirect",
    "cache_busting_token",
    "create_robots_txt_router",
    "is_bot",
    "matching_agent",
    "robots_txt_response",
]
