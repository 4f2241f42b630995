"""Shareable-link encoding for manifest text.

Token format: percent-encode the UTF-8 text (the same unreserved set as
JavaScript's ``encodeURIComponent``), then base64 the ASCII result. Links
produced by the browser build of the visualizer decode here unchanged.
"""

from __future__ import annotations

import base64
import binascii
from urllib.parse import parse_qs, quote, unquote, urlencode, urlsplit, urlunsplit

from kubeviz.domain.errors import ShareDecodeError, ShareEncodeError

DEFAULT_PARAM = "yaml"

# Characters encodeURIComponent leaves alone beyond quote()'s always-safe set.
_URI_COMPONENT_SAFE = "!~*'()"


def encode_share_token(text: str) -> str:
    """Pack *text* into a URL-safe token."""
    try:
        escaped = quote(text, safe=_URI_COMPONENT_SAFE, encoding="utf-8", errors="strict")
    except UnicodeEncodeError as exc:
        raise ShareEncodeError(f"Text is not representable as UTF-8: {exc.reason}") from exc
    return base64.b64encode(escaped.encode("ascii")).decode("ascii")


def decode_share_token(token: str) -> str:
    """Unpack a token produced by :func:`encode_share_token`."""
    # An unescaped '+' in a query string arrives as a space.
    cleaned = token.strip().replace(" ", "+")
    if not cleaned:
        raise ShareDecodeError("Share token is empty")
    cleaned += "=" * (-len(cleaned) % 4)
    try:
        escaped = base64.b64decode(cleaned, validate=True).decode("ascii")
    except (binascii.Error, UnicodeDecodeError) as exc:
        raise ShareDecodeError(f"Share token is not valid base64: {exc}") from exc
    try:
        return unquote(escaped, encoding="utf-8", errors="strict")
    except UnicodeDecodeError as exc:
        raise ShareDecodeError(f"Share token does not contain UTF-8 text: {exc.reason}") from exc


def build_share_url(text: str, base_url: str, *, param: str = DEFAULT_PARAM) -> str:
    """Return *base_url* with the encoded text in query parameter *param*.

    Existing query parameters on *base_url* other than *param* are kept.
    """
    token = encode_share_token(text)
    parts = urlsplit(base_url)
    query = [
        (key, value)
        for key, values in parse_qs(parts.query, keep_blank_values=True).items()
        if key != param
        for value in values
    ]
    query.append((param, token))
    return urlunsplit(parts._replace(query=urlencode(query)))


def extract_share_token(url_or_token: str, *, param: str = DEFAULT_PARAM) -> str:
    """Pull the token out of a share URL; a bare token is returned as-is."""
    candidate = url_or_token.strip()
    parts = urlsplit(candidate)
    if not parts.scheme and not parts.query:
        return candidate
    values = parse_qs(parts.query, keep_blank_values=True).get(param)
    if not values:
        raise ShareDecodeError(f"URL has no '{param}' query parameter")
    return values[0]


def decode_share_url(url_or_token: str, *, param: str = DEFAULT_PARAM) -> str:
    """Decode manifest text from a share URL or bare token."""
    return decode_share_token(extract_share_token(url_or_token, param=param))
