"""IPv4 address formatting for the integer addresses reported by the proxy API."""

import math
import re
from typing import Any, List

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")


def _parse_int(value: Any) -> int:
    """Parse a base-10 integer prefix; anything unparsable decodes as 0."""
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else 0
    match = _INT_PREFIX.match(str(value))
    return int(match.group(1)) if match else 0


def decode_ip_to_octets(ip: Any) -> List[int]:
    """Produce the four big-endian octets of an IPv4 address."""
    ip = _parse_int(ip)
    return [
        ip >> 24 & 255,
        ip >> 16 & 255,
        ip >> 8 & 255,
        ip & 255,
    ]


def public_address_to_string(ipv4: Any, port: Any) -> str:
    """Convert an integer address to an ipv4 formatted host:port pair."""
    octets = decode_ip_to_octets(ipv4)
    return ".".join(str(octet) for octet in octets) + ":" + str(port)
