"""robots.txt content that disallows every known AI crawler.

The text is derived from `AI_AGENTS` once per process. Serve it with the
router helper:

    ```python
    from fastapi import FastAPI
    from fastapi_no_ai.robots import create_robots_txt_router

    app = FastAPI()
    app.include_router(create_robots_txt_router())
    ```
"""

import logging
from typing import Iterable

from fastapi import APIRouter
from starlette.responses import PlainTextResponse

from fastapi_no_ai.consts import AI_AGENTS, ROBOTS_TXT_PATH
from fastapi_no_ai.utils import OnceCell

logger = logging.getLogger(__name__)

_ROBOTS_TXT: "OnceCell[str]" = OnceCell()


def format_robots_txt(agents: Iterable[str]) -> str:
    """Render one `User-Agent` / `Disallow: /` pair per agent, in order."""
    return "".join(f"User-Agent: {agent}\nDisallow: /\n" for agent in agents)


def _compute_robots_txt() -> str:
    text = format_robots_txt(AI_AGENTS)
    logger.debug(f"Computed robots.txt for {len(AI_AGENTS)} AI agents")
    return text


def bot_blocking_robots_txt() -> str:
    """Return the robots.txt body blocking all known AI crawlers.

    Every call returns the same string object.
    """
    return _ROBOTS_TXT.get_or_init(_compute_robots_txt)


def robots_txt_response() -> PlainTextResponse:
    return PlainTextResponse(bot_blocking_robots_txt())


def create_robots_txt_router(path: str = ROBOTS_TXT_PATH) -> APIRouter:
    """Create a router serving the robots.txt text at `path`.

    Args:
        path: Route path, `/robots.txt` unless the app is mounted elsewhere

    Returns:
        An APIRouter with a single GET route, hidden from the OpenAPI schema
    """
    router = APIRouter()
    router.add_api_route(
        path,
        robots_txt_response,
        methods=["GET"],
        response_class=PlainTextResponse,
        include_in_schema=False,
    )
    return router
