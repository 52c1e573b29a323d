"""Redirect responses handed to matched crawlers."""

import time
from typing import Optional, Type, cast

from starlette import status
from starlette.responses import Response

from fastapi_no_ai.consts import CACHE_BUSTING_SEPARATOR, LOCATION_HEADER
from fastapi_no_ai.typing import Clock, ResponseT


class RedirectConstructionError(RuntimeError):
    """The redirect could not be built from the configured destination.

    Destinations are validated when the middleware is configured, so seeing
    this means that validation was bypassed.
    """


def cache_busting_token(clock: Optional[Clock] = None) -> int:
    """Nanoseconds since the Unix epoch, or 0 if the clock cannot tell.

    Args:
        clock: Source of nanosecond timestamps

    Returns:
        A non-negative integer that changes between calls
    """
    try:
        elapsed = (clock or time.time_ns)()
    except (OSError, OverflowError, ValueError):
        return 0
    if elapsed < 0:
        return 0
    return elapsed


def redirect_location(
    destination: str, bust_cache: bool, clock: Optional[Clock] = None
) -> str:
    if not bust_cache:
        return destination
    return f"{destination}{CACHE_BUSTING_SEPARATOR}{cache_busting_token(clock)}"


def build_redirect(
    destination: str,
    bust_cache: bool,
    response_class: Optional[Type[ResponseT]] = None,
    clock: Optional[Clock] = None,
) -> ResponseT:
    """Build a `301 Moved Permanently` response pointing at `destination`.

    Args:
        destination: Redirect target
        bust_cache: Append `?=<nanoseconds>` so every redirect is unique
        response_class: Response type to instantiate, constructed with
            `content=None` so that its empty body is used. Defaults to
            `starlette.responses.Response`.
        clock: Timestamp source for the cache-busting token

    Returns:
        The redirect response, with an empty body

    Raises:
        RedirectConstructionError: If the location cannot be used as a header
    """
    location = redirect_location(destination, bust_cache, clock)
    return make_redirect_response(location, response_class)


def make_redirect_response(
    location: str, response_class: Optional[Type[ResponseT]] = None
) -> ResponseT:
    """Build the 301 response for an already final `location`."""
    cls = cast(Type[ResponseT], response_class or Response)
    try:
        return cls(
            content=None,
            status_code=status.HTTP_301_MOVED_PERMANENTLY,
            headers={LOCATION_HEADER: location},
        )
    except (UnicodeEncodeError, TypeError, ValueError) as e:
        raise RedirectConstructionError(
            f"Cannot build redirect to {location!r}: {e}"
        ) from e
