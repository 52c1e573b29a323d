"""User-agent matching against the AI crawler registry.

Matching is a plain "any-of" substring test over `AI_AGENTS`: no case folding,
no trimming, no regular expressions. Anything that cannot be read as header
text is treated as "not a bot" so that malformed headers never lock out a real
client.
"""

from typing import Iterable, Optional, Union

from fastapi_no_ai.consts import AI_AGENTS, USER_AGENT_HEADER
from fastapi_no_ai.typing import Scope


def header_to_str(raw: bytes) -> Optional[str]:
    """Decode a raw header value, or return None if it is not header text.

    Only visible ASCII and horizontal tab are accepted, which is the rule HTTP
    stacks apply before exposing a header value as a string.

    Args:
        raw: Header value as received on the wire

    Returns:
        The decoded value, or None for obs-text / control bytes
    """
    for byte in raw:
        if byte != 0x09 and not 0x20 <= byte <= 0x7E:
            return None
    return raw.decode("ascii")


def user_agent_from_scope(scope: Scope) -> Optional[bytes]:
    """Return the first `user-agent` header value of an ASGI scope, if any."""
    for name, value in scope.get("headers") or ():
        if name == USER_AGENT_HEADER:
            return value
    return None


def matching_agent(
    user_agent: Optional[Union[str, bytes]],
    agents: Iterable[str] = AI_AGENTS,
) -> Optional[str]:
    """Find the first registry entry contained in a user-agent.

    Args:
        user_agent: Header value; None when the header is absent
        agents: Entries to test, in order

    Returns:
        The first entry that occurs in `user_agent`, or None
    """
    if user_agent is None:
        return None
    if isinstance(user_agent, (bytes, bytearray)):
        user_agent = header_to_str(bytes(user_agent))
        if user_agent is None:
            return None
    for agent in agents:
        if agent in user_agent:
            return agent
    return None


def is_bot(user_agent: Optional[Union[str, bytes]]) -> bool:
    """Whether `user_agent` identifies one of the known AI crawlers."""
    return matching_agent(user_agent) is not None
