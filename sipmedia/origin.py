"""The o= (session origin) line of an SDP."""

from __future__ import annotations

import ipaddress
import secrets
from dataclasses import dataclass

_FALLBACK_ADDR = "69.28.157.198"


def is_ipv6(addr: str) -> bool:
    """Return True if ``addr`` is an IPv6 address (brackets allowed)."""
    try:
        ipaddress.IPv6Address(addr.strip("[]"))
    except ValueError:
        return False
    return True


def generate_origin_id() -> str:
    """Return a random decimal session identifier for an o= line."""
    return str(secrets.randbits(63))


@dataclass
class Origin:
    """The session origin of an SDP."""

    user: str = ""  # first value of the o= line
    id: str = ""  # second value
    version: str = ""  # third value
    addr: str = ""  # IP of the originating user agent

    def format(self) -> str:
        """Render the ``o=`` line, filling in defaults for blank fields."""
        origin_id = self.id or generate_origin_id()
        user = self.user or "-"
        version = self.version or origin_id
        net = "IP6" if is_ipv6(self.addr) else "IP4"
        addr = self.addr or _FALLBACK_ADDR
        return f"o={user} {origin_id} {version} IN {net} {addr}\r\n"