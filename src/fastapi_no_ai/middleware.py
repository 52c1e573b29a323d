"""ASGI middleware that redirects AI crawlers.

`NoAIMiddleware` sits in front of any ASGI application. For every HTTP request
and websocket handshake it looks at the `User-Agent` header once; if the header
contains one of `AI_AGENTS` the request is answered with a `301` to the
configured URL (a refused handshake for websockets) and the wrapped application
is never called. Every other request, and every `lifespan` event, is handed to
the wrapped application with the original `scope`, `receive` and `send`, so its
streaming, backpressure, cancellation and exceptions are exactly its own.

Usage:
    ```python
    from fastapi import FastAPI
    from fastapi_no_ai import NoAILayer, NoAIMiddleware

    app = FastAPI()
    app.add_middleware(NoAIMiddleware, redirect_url="https://example.com/")

    # or, building the configuration first
    NoAILayer("https://example.com/").force_refetching(False).install(app)
    ```
"""

import logging
from dataclasses import dataclass
from typing import Optional, Type, Union

from pydantic import BaseModel, ConfigDict, field_validator
from starlette.applications import Starlette
from starlette.responses import Response

from fastapi_no_ai.matching import matching_agent, user_agent_from_scope
from fastapi_no_ai.responses import make_redirect_response, redirect_location
from fastapi_no_ai.typing import ASGIApp, Receive, Scope, Send

logger = logging.getLogger(__name__)


class NoAIConfig(BaseModel):
    """Where matched crawlers are sent, and whether each redirect is unique."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    redirect_url: str
    force_refetching: bool = True

    @field_validator("redirect_url")
    @classmethod
    def validate_redirect_url(cls, v: str) -> str:
        """Reject URLs that cannot be sent as a `Location` header."""
        if not v:
            raise ValueError("redirect_url must not be empty")
        for ch in v:
            if ch != "\t" and (ord(ch) < 0x20 or ord(ch) == 0x7F):
                raise ValueError(
                    f"redirect_url contains control character {ch!r}"
                )
        try:
            v.encode("latin-1")
        except UnicodeEncodeError as e:
            raise ValueError(f"redirect_url is not a valid header value: {e}") from e
        return v

    def with_force_refetching(self, force_refetching: bool) -> "NoAIConfig":
        return self.model_copy(update={"force_refetching": force_refetching})


@dataclass(frozen=True)
class Forward:
    """Hand the request to the wrapped application."""


@dataclass(frozen=True)
class Redirect:
    """Answer with a redirect to `location` without calling the application."""

    location: str


FORWARD = Forward()

Decision = Union[Forward, Redirect]


class NoAIMiddleware:
    """Pure ASGI middleware redirecting requests from known AI crawlers.

    Args:
        app: The wrapped ASGI application
        redirect_url: Destination for matched crawlers
        force_refetching: Append a per-request `?=<nanoseconds>` token to the
            destination. Defaults to True.
        config: A prebuilt `NoAIConfig`, instead of the two arguments above
        response_class: Starlette response class used for redirects
    """

    __slots__ = ("app", "config", "response_class")

    def __init__(
        self,
        app: ASGIApp,
        redirect_url: Optional[str] = None,
        force_refetching: Optional[bool] = None,
        *,
        config: Optional[NoAIConfig] = None,
        response_class: Optional[Type[Response]] = None,
    ):
        if config is None:
            if redirect_url is None:
                raise ValueError("NoAIMiddleware requires redirect_url or config")
            config = NoAIConfig(
                redirect_url=redirect_url,
                force_refetching=True if force_refetching is None else force_refetching,
            )
        elif redirect_url is not None or force_refetching is not None:
            raise ValueError(
                "Pass either config or redirect_url/force_refetching, not both"
            )
        self.app = app
        self.config = config
        self.response_class = response_class or Response
        logger.info(
            f"NoAIMiddleware redirecting AI crawlers to {config.redirect_url} "
            f"(force_refetching={config.force_refetching})"
        )

    def decide(self, scope: Scope) -> Decision:
        agent = matching_agent(user_agent_from_scope(scope))
        if agent is None:
            return FORWARD
        location = redirect_location(
            self.config.redirect_url, self.config.force_refetching
        )
        logger.debug(
            f"Redirecting {agent} request for {scope.get('path', '')} to {location}"
        )
        return Redirect(location)

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] not in ("http", "websocket"):
            await self.app(scope, receive, send)
            return

        decision = self.decide(scope)
        if isinstance(decision, Forward):
            await self.app(scope, receive, send)
            return

        response = make_redirect_response(decision.location, self.response_class)
        if scope["type"] == "websocket":
            await self.deny_websocket(scope, response, send)
        else:
            await response(scope, receive, send)

    async def deny_websocket(self, scope: Scope, response: Response, send: Send) -> None:
        """Refuse a crawler's websocket handshake before it is accepted.

        Servers offering the `websocket.http.response` extension get the
        redirect itself; otherwise the handshake is closed.
        """
        if "websocket.http.response" in (scope.get("extensions") or {}):
            await send({
                "type": "websocket.http.response.start",
                "status": response.status_code,
                "headers": response.raw_headers,
            })
            await send({"type": "websocket.http.response.body", "body": response.body})
        else:
            await send({"type": "websocket.close"})

    def __repr__(self) -> str:
        return f"{type(self).__name__}(app={self.app!r}, config={self.config!r})"


class NoAILayer:
    """Factory wrapping ASGI applications in `NoAIMiddleware`.

    The layer owns a frozen `NoAIConfig`; builder methods return new layers,
    so one layer can be shared between applications.
    """

    __slots__ = ("config", "response_class")

    def __init__(
        self,
        redirect_url: str,
        *,
        response_class: Optional[Type[Response]] = None,
    ):
        self.config = NoAIConfig(redirect_url=redirect_url)
        self.response_class = response_class

    @classmethod
    def from_config(
        cls, config: NoAIConfig, response_class: Optional[Type[Response]] = None
    ) -> "NoAILayer":
        layer = cls.__new__(cls)
        layer.config = config
        layer.response_class = response_class
        return layer

    def force_refetching(self, force_refetching: bool) -> "NoAILayer":
        """Return a layer that does (or does not) make each redirect unique."""
        return type(self).from_config(
            self.config.with_force_refetching(force_refetching),
            self.response_class,
        )

    def __call__(self, app: ASGIApp) -> NoAIMiddleware:
        return NoAIMiddleware(
            app, config=self.config, response_class=self.response_class
        )

    def install(self, app: Starlette) -> None:
        """Register the middleware on a Starlette or FastAPI application."""
        app.add_middleware(
            NoAIMiddleware, config=self.config, response_class=self.response_class
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}(config={self.config!r})"
