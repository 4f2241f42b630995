"""Tests for share token and URL encoding."""

from __future__ import annotations

import pytest

from kubeviz.domain.errors import ShareDecodeError
from kubeviz.domain.share import (
    build_share_url,
    decode_share_token,
    decode_share_url,
    encode_share_token,
    extract_share_token,
)
from tests.conftest import SAMPLE_MANIFESTS


class TestShareToken:
    def test_matches_browser_encoding(self) -> None:
        # btoa(encodeURIComponent("a b"))
        assert encode_share_token("a b") == "YSUyMGI="
        assert encode_share_token("hello") == "aGVsbG8="

    def test_round_trip_manifests(self) -> None:
        assert decode_share_token(encode_share_token(SAMPLE_MANIFESTS)) == SAMPLE_MANIFESTS

    def test_round_trip_non_ascii(self) -> None:
        text = "metadata:\n  name: café-☕\n"
        assert decode_share_token(encode_share_token(text)) == text

    def test_missing_padding_is_tolerated(self) -> None:
        assert decode_share_token("aGVsbG8") == "hello"

    def test_space_is_read_as_plus(self) -> None:
        assert encode_share_token("~~~a") == "fn5+YQ=="
        assert decode_share_token("fn5 YQ==") == "~~~a"

    def test_invalid_base64(self) -> None:
        with pytest.raises(ShareDecodeError):
            decode_share_token("!!!!")

    def test_empty_token(self) -> None:
        with pytest.raises(ShareDecodeError):
            decode_share_token("   ")

    def test_invalid_utf8_payload(self) -> None:
        # base64 of "%FF"
        with pytest.raises(ShareDecodeError):
            decode_share_token("JUZG")


class TestShareUrl:
    def test_build_url(self) -> None:
        url = build_share_url("hello", "https://kubeviz.dev/")
        assert url == "https://kubeviz.dev/?yaml=aGVsbG8%3D"

    def test_build_url_keeps_other_params(self) -> None:
        url = build_share_url("hello", "https://kubeviz.dev/app?theme=dark&yaml=old")
        assert url == "https://kubeviz.dev/app?theme=dark&yaml=aGVsbG8%3D"

    def test_custom_param(self) -> None:
        url = build_share_url("hello", "https://kubeviz.dev/", param="m")
        assert extract_share_token(url, param="m") == "aGVsbG8="

    def test_extract_from_url(self) -> None:
        assert extract_share_token("https://kubeviz.dev/?yaml=aGVsbG8%3D") == "aGVsbG8="

    def test_bare_token_passes_through(self) -> None:
        assert extract_share_token("  aGVsbG8=  ") == "aGVsbG8="

    def test_url_without_param(self) -> None:
        with pytest.raises(ShareDecodeError, match="yaml"):
            extract_share_token("https://kubeviz.dev/?other=1")

    def test_decode_url_round_trip(self) -> None:
        url = build_share_url(SAMPLE_MANIFESTS, "https://kubeviz.dev/")
        assert decode_share_url(url) == SAMPLE_MANIFESTS
