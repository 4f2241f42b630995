"""ShareService — pack manifest text into links and unpack it again."""

from __future__ import annotations

import logging

from kubeviz.domain.errors import ShareDecodeError, ShareEncodeError
from kubeviz.domain.share import build_share_url, decode_share_url, extract_share_token
from kubeviz.services.base import BaseService
from kubeviz.services.result import ErrorCode, ServiceResult
from kubeviz.services.telemetry import traced

logger = logging.getLogger(__name__)

MSG_EMPTY_SHARE = "Please enter some YAML content first"
MSG_ENCODE_ERROR = "Error creating shareable URL"
MSG_DECODE_ERROR = "Error loading YAML from URL"


class ShareService(BaseService):
    """Build and read shareable links using the ``[share]`` settings."""

    @traced
    def encode(self, text: str) -> ServiceResult:
        """Return a share URL whose query carries *text*."""
        op = "share_encode"
        if not text.strip():
            return ServiceResult.failure(op, ErrorCode.EMPTY_INPUT, MSG_EMPTY_SHARE)

        share = self._settings.share
        try:
            url = build_share_url(text, share.base_url, param=share.param)
        except ShareEncodeError as exc:
            logger.warning("Share encoding failed: %s", exc)
            return ServiceResult.failure(
                op, ErrorCode.SHARE_ENCODE_ERROR, MSG_ENCODE_ERROR, reason=str(exc)
            )
        token = extract_share_token(url, param=share.param)
        return ServiceResult(
            ok=True,
            op=op,
            data={"url": url, "token": token, "length": len(url)},
        )

    @traced
    def decode(self, url_or_token: str) -> ServiceResult:
        """Recover manifest text from a share URL or a bare token."""
        op = "share_decode"
        try:
            content = decode_share_url(url_or_token, param=self._settings.share.param)
        except ShareDecodeError as exc:
            logger.warning("Share decoding failed: %s", exc)
            return ServiceResult.failure(
                op, ErrorCode.SHARE_DECODE_ERROR, MSG_DECODE_ERROR, reason=str(exc)
            )
        return ServiceResult(ok=True, op=op, data={"content": content})
