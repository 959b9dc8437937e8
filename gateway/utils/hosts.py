"""
Host header canonicalization
"""

from typing import Optional, Tuple


def split_host_port(hostport: str) -> Optional[Tuple[str, str]]:
    """
    Split "host:port" or "[host]:port" into its parts

    Follows the usual socket address rules: a bracketed host must be
    followed by ":port", an unbracketed host may not contain a colon and
    stray brackets are rejected. The port may be empty.

    Returns:
        (host, port) with brackets removed, or None when the value does not
        have a host:port shape
    """
    i = hostport.rfind(':')
    if i < 0:
        return None

    if hostport.startswith('['):
        end = hostport.find(']')
        if end < 0 or end + 1 != i:
            return None
        host = hostport[1:end]
        j, k = 1, end + 1
    else:
        host = hostport[:i]
        if ':' in host:
            return None
        j, k = 0, 0

    if '[' in hostport[j:] or ']' in hostport[k:]:
        return None

    return host, hostport[i + 1:]


def _strip_brackets(host: str) -> str:
    if len(host) >= 2 and host[0] == '[' and host[-1] == ']':
        return host[1:-1]
    return host


def _canonicalize_once(host: str) -> str:
    host = host.strip().lower()
    if not host:
        return ""

    parts = split_host_port(host)
    if parts is not None:
        host = parts[0]

    return _strip_brackets(host)


def canonicalize_host(raw: str) -> str:
    """
    Turn a raw Host header value into a routing key

    Trims whitespace, lowercases, drops any port and one pair of
    surrounding IPv6 brackets. Values that do not parse as host:port are
    kept whole. The steps repeat until the value is stable, so the result
    canonicalizes to itself.

        >>> canonicalize_host("MANGO.COM:8080")
        'mango.com'
        >>> canonicalize_host("[::1]")
        '::1'
    """
    host = _canonicalize_once(raw or "")
    while True:
        again = _canonicalize_once(host)
        if again == host:
            return host
        host = again
