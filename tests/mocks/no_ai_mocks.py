"""Mock ASGI collaborators for no-AI middleware testing."""

import asyncio
import time
from typing import Any, Dict, List, Optional, Tuple

from starlette.responses import PlainTextResponse, Response
from starlette.types import Message, Receive, Scope, Send


class MockASGIApp:
    """Downstream ASGI application recording every call it receives."""

    def __init__(self, response: Optional[Response] = None, delay_ms: float = 0,
                 error: Optional[Exception] = None):
        self.response = response or PlainTextResponse("downstream", status_code=200)
        self.delay_ms = delay_ms
        self.error = error
        self.calls: List[Dict[str, Any]] = []
        self.completed = 0
        self.cancelled = 0

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        self.calls.append({
            "scope": scope,
            "receive": receive,
            "send": send,
            "timestamp": time.time(),
            "path": scope.get("path", "/"),
        })

        try:
            if self.delay_ms > 0:
                await asyncio.sleep(self.delay_ms / 1000)
        except asyncio.CancelledError:
            self.cancelled += 1
            raise

        if self.error is not None:
            raise self.error

        await self.response(scope, receive, send)
        self.completed += 1


class MockReceive:
    """Mock ASGI receive callable."""

    def __init__(self, body: bytes = b""):
        self.body = body
        self.call_count = 0

    async def __call__(self) -> Message:
        self.call_count += 1
        if self.call_count == 1:
            return {"type": "http.request", "body": self.body, "more_body": False}
        return {"type": "http.disconnect"}


class MockSend:
    """Mock ASGI send callable."""

    def __init__(self):
        self.messages: List[Message] = []

    async def __call__(self, message: Message) -> None:
        self.messages.append(message)

    def get_response_start(self) -> Optional[Message]:
        for msg in self.messages:
            if msg["type"] == "http.response.start":
                return msg
        return None

    def get_response_body(self) -> bytes:
        body = b""
        for msg in self.messages:
            if msg["type"] == "http.response.body":
                body += msg.get("body", b"")
        return body

    def get_status_code(self) -> Optional[int]:
        start_msg = self.get_response_start()
        return start_msg.get("status") if start_msg else None

    def get_headers(self) -> Dict[str, str]:
        start_msg = self.get_response_start()
        if not start_msg:
            return {}
        return {
            name.decode("latin-1"): value.decode("latin-1")
            for name, value in start_msg.get("headers", [])
        }


class MiddlewareTestHelper:
    """Builds ASGI scopes for middleware tests."""

    @staticmethod
    def create_test_scope(
        user_agent: Optional[bytes] = None,
        path: str = "/",
        method: str = "GET",
        extra_headers: Optional[List[Tuple[bytes, bytes]]] = None,
    ) -> Scope:
        headers: List[Tuple[bytes, bytes]] = [(b"host", b"testserver")]
        if user_agent is not None:
            headers.append((b"user-agent", user_agent))
        headers.extend(extra_headers or [])
        return {
            "type": "http",
            "asgi": {"version": "3.0"},
            "http_version": "1.1",
            "method": method,
            "scheme": "http",
            "path": path,
            "raw_path": path.encode(),
            "query_string": b"",
            "root_path": "",
            "headers": headers,
            "client": ("127.0.0.1", 12345),
            "server": ("testserver", 80),
        }

    @staticmethod
    def create_websocket_scope(
        user_agent: Optional[bytes] = None,
        path: str = "/ws",
        denial_response: bool = False,
    ) -> Scope:
        headers: List[Tuple[bytes, bytes]] = [(b"host", b"testserver")]
        if user_agent is not None:
            headers.append((b"user-agent", user_agent))
        scope: Scope = {
            "type": "websocket",
            "asgi": {"version": "3.0"},
            "http_version": "1.1",
            "scheme": "ws",
            "path": path,
            "raw_path": path.encode(),
            "query_string": b"",
            "root_path": "",
            "headers": headers,
            "client": ("127.0.0.1", 12345),
            "server": ("testserver", 80),
            "subprotocols": [],
        }
        if denial_response:
            scope["extensions"] = {"websocket.http.response": {}}
        return scope
