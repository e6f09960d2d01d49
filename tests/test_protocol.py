# Area: Shared Tests
"""Tests for wire helpers: socket URL derivation and frame building."""

import json

import pytest

from overcookied_client._shared.protocol import (
    INBOUND_TYPES,
    OUTBOUND_TYPES,
    Origin,
    build_frame,
    derive_ws_url,
    encode_frame,
    with_token,
)
from overcookied_client.errors import ConfigurationError


class TestDeriveWsUrlWithOverride:
    """An explicit API URL decides the endpoint."""

    def test_http_maps_to_ws(self):
        assert derive_ws_url("http://localhost:8080") == "ws://localhost:8080/ws"

    def test_https_maps_to_wss(self):
        assert derive_ws_url("https://api.example.com") == "wss://api.example.com/ws"

    def test_keeps_port(self):
        assert derive_ws_url("http://dev-server:3000") == "ws://dev-server:3000/ws"
        assert derive_ws_url("https://api.example.com:8443") == "wss://api.example.com:8443/ws"

    def test_trailing_slash_is_not_doubled(self):
        assert derive_ws_url("http://localhost:8080/") == "ws://localhost:8080/ws"

    def test_override_wins_over_origin(self):
        origin = Origin("https:", "production.example.com")
        assert derive_ws_url("http://localhost:8080", origin) == "ws://localhost:8080/ws"


class TestDeriveWsUrlFromOrigin:
    """Without an override the page origin decides the endpoint."""

    def test_https_origin(self):
        origin = Origin("https:", "overcookied.example.com")
        assert derive_ws_url(None, origin) == "wss://overcookied.example.com/ws"

    def test_http_origin(self):
        assert derive_ws_url(None, Origin("http:", "localhost:3000")) == "ws://localhost:3000/ws"

    def test_origin_port_is_kept(self):
        origin = Origin("https:", "game.example.com:8080")
        assert derive_ws_url(None, origin) == "wss://game.example.com:8080/ws"

    def test_empty_override_counts_as_absent(self):
        origin = Origin("https:", "production.example.com")
        assert derive_ws_url("", origin) == "wss://production.example.com/ws"

    def test_no_override_and_no_origin_raises(self):
        with pytest.raises(ConfigurationError) as exc_info:
            derive_ws_url("", None)
        assert exc_info.value.missing_keys == ["api_url", "origin"]

    def test_is_deterministic(self):
        origin = Origin("http:", "localhost:3000")
        assert derive_ws_url(None, origin) == derive_ws_url(None, origin)


class TestOrigin:
    def test_from_url(self):
        assert Origin.from_url("https://x.com:8443") == Origin("https:", "x.com:8443")

    def test_from_url_rejects_relative(self):
        with pytest.raises(ConfigurationError):
            Origin.from_url("x.com")


class TestWithToken:
    def test_appends_token_param(self):
        assert with_token("ws://h/ws", "abc") == "ws://h/ws?token=abc"

    def test_token_is_url_encoded(self):
        assert with_token("ws://h/ws", "a+b/c=") == "ws://h/ws?token=a%2Bb%2Fc%3D"


class TestFrames:
    def test_build_frame_defaults_to_empty_payload(self):
        assert build_frame("JOIN_QUEUE") == {"type": "JOIN_QUEUE", "payload": {}}

    def test_build_frame_copies_payload(self):
        payload = {"count": 2}
        frame = build_frame("CLICK", payload)
        payload["count"] = 1
        assert frame["payload"] == {"count": 2}

    def test_encode_frame_is_compact_json(self):
        text = encode_frame(build_frame("CLICK", {"count": 1}))
        assert text == '{"type":"CLICK","payload":{"count":1}}'
        assert json.loads(text)["payload"]["count"] == 1

    def test_type_sets_are_disjoint(self):
        assert INBOUND_TYPES.isdisjoint(OUTBOUND_TYPES)
        assert len(INBOUND_TYPES) == 5
        assert len(OUTBOUND_TYPES) == 4
