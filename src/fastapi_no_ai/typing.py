from typing import Callable, TypeVar

from starlette.responses import Response
from starlette.types import ASGIApp, Message, Receive, Scope, Send

ResponseT = TypeVar("ResponseT", bound=Response)
Clock = Callable[[], int]

__all__ = ["ASGIApp", "Clock", "Message", "Receive", "ResponseT", "Scope", "Send"]
