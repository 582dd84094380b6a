"""Tests for the tool gateway, driven through the generated handlers.

The BitBadges API is replaced by httpx.MockTransport (see FakeAPI in
conftest.py).
"""

from __future__ import annotations

import json
from typing import Any

import httpx

from bitbadges_mcp.config import DEFAULT_BASE_URL
from bitbadges_mcp.gateway import Gateway, path_arg, query_args, text_result


def text_of(result: dict[str, Any]) -> str:
    return "\n".join(block["text"] for block in result["content"])


class TestHelpers:
    def test_path_arg(self):
        assert path_arg({"collectionId": 7}, "collectionId") == "7"

    def test_missing_path_arg_left_as_placeholder(self):
        assert path_arg({}, "collectionId") == "{collectionId}"

    def test_query_args_skip_absent(self):
        assert query_args({"address": "bb1x", "username": None, "other": 1}, ["address", "username"]) == {
            "address": "bb1x",
        }

    def test_text_result(self):
        assert text_result("hi") == {"content": [{"type": "text", "text": "hi"}]}
        assert text_result("no", is_error=True)["isError"] is True


class TestConfigure:
    async def test_success_message(self, gateway):
        result = await gateway.call("bitbadges_configure", {"apiKey": "k1"})
        assert "isError" not in result
        assert text_of(result) == f"BitBadges API configured successfully with base URL: {DEFAULT_BASE_URL}"
        assert gateway.config.api_key == "k1"

    async def test_custom_base_url(self, gateway):
        await gateway.call("bitbadges_configure", {"apiKey": "k1", "baseUrl": "https://x.test"})
        assert gateway.config.base_url == "https://x.test"

    async def test_missing_api_key(self, gateway):
        result = await gateway.call("bitbadges_configure", {"baseUrl": "https://x.test"})
        assert result["isError"] is True
        assert text_of(result).startswith("Error: Invalid configuration:")
        assert gateway.config is None

    async def test_reconfigure_replaces(self, gateway):
        await gateway.call("bitbadges_configure", {"apiKey": "k1"})
        await gateway.call("bitbadges_configure", {"apiKey": "k2"})
        assert gateway.config.api_key == "k2"

    async def test_failed_reconfigure_keeps_previous(self, gateway):
        await gateway.call("bitbadges_configure", {"apiKey": "k1"})
        await gateway.call("bitbadges_configure", {"apiKey": ""})
        assert gateway.config.api_key == "k1"

    async def test_gateways_are_independent(self, generated):
        first = generated.create_gateway()
        second = generated.create_gateway()
        await first.call("bitbadges_configure", {"apiKey": "k1"})
        assert second.config is None


class TestUnconfigured:
    """Every API tool refuses to run before configure."""

    async def test_every_tool_reports_missing_configuration(self, gateway, tools, api):
        for tool in tools[1:]:
            result = await gateway.call(tool["name"], {})
            assert result["isError"] is True
            assert text_of(result) == "Error: API key not configured. Use bitbadges_configure tool first."
        assert api.requests == []


class TestDispatch:
    async def test_path_substitution_and_header(self, configured, api):
        await configured.call("bitbadges_getBadgeMetadata", {"collectionId": "7", "badgeId": "3"})
        assert api.last.url.path == "/api/v0/collection/7/3/metadata"
        assert api.last.url.host == "api.test"
        assert api.last.headers["x-api-key"] == "test-api-key"
        assert api.last.method == "GET"

    async def test_default_base_url(self, gateway, api):
        await gateway.call("bitbadges_configure", {"apiKey": "k1"})
        await gateway.call("bitbadges_getStatus", {})
        assert str(api.last.url) == f"{DEFAULT_BASE_URL}/api/v0/status"

    async def test_versioned_path_not_doubled(self, configured, api):
        await configured.call("bitbadges_getCollections", {"collectionsToFetch": []})
        assert api.last.url.path == "/api/v0/collections"

    async def test_get_never_sends_body(self, configured, api):
        await configured.call(
            "bitbadges_getBadgeMetadata",
            {"collectionId": "7", "badgeId": "3", "body": {"x": 1}, "extra": "y"},
        )
        assert api.last.content == b""
        assert api.last.url.query == b""

    async def test_get_query_parameters(self, configured, api):
        await configured.call("bitbadges_getAccount", {"address": "bb1abc", "body": {"x": 1}})
        assert api.last.url.params["address"] == "bb1abc"
        assert "username" not in api.last.url.params
        assert api.last.content == b""

    async def test_post_forwards_arguments(self, configured, api):
        args = {"collectionsToFetch": [{"collectionId": "1"}]}
        await configured.call("bitbadges_getCollections", args)
        assert api.last.method == "POST"
        assert json.loads(api.last.content) == args
        assert api.last.headers["content-type"] == "application/json"

    async def test_post_without_arguments_sends_empty_object(self, configured, api):
        await configured.call("bitbadges_getStatus", {})
        assert json.loads(api.last.content) == {}

    async def test_missing_path_argument_passes_through(self, configured, api):
        await configured.call("bitbadges_getBadgeMetadata", {"collectionId": "7"})
        assert api.last.url.path == "/api/v0/collection/7/{badgeId}/metadata"

    async def test_result_is_pretty_json(self, configured, api):
        api.payload = {"status": {"block": {"height": "100"}}}
        result = await configured.call("bitbadges_getStatus", {})
        assert "isError" not in result
        assert text_of(result) == json.dumps(api.payload, indent=2)


class TestErrors:
    async def test_unknown_tool(self, configured):
        result = await configured.call("bitbadges_doesNotExist", {})
        assert result["isError"] is True
        assert text_of(result) == "Error: Unknown tool: bitbadges_doesNotExist"

    async def test_unknown_tool_before_configure(self, gateway):
        result = await gateway.call("nope", {})
        assert text_of(result) == "Error: Unknown tool: nope"

    async def test_remote_error_message(self, configured, api):
        api.status_code = 400
        api.payload = {"errorMessage": "Collection not found"}
        result = await configured.call("bitbadges_getStatus", {})
        assert result["isError"] is True
        assert text_of(result) == "Error: API Error (400): Collection not found"

    async def test_remote_error_reason_phrase(self, configured, api):
        api.status_code = 500
        api.payload = "upstream exploded"
        result = await configured.call("bitbadges_getStatus", {})
        assert text_of(result) == "Error: API Error (500): Internal Server Error"

    async def test_network_error(self, configured, api):
        api.error = httpx.ConnectError
        result = await configured.call("bitbadges_getStatus", {})
        assert result["isError"] is True
        assert text_of(result) == "Error: Network Error: No response received from API"

    async def test_timeout_is_network_error(self, configured, api):
        api.error = httpx.ReadTimeout
        result = await configured.call("bitbadges_getStatus", {})
        assert text_of(result) == "Error: Network Error: No response received from API"

    async def test_request_construction_error(self, gateway, api):
        await gateway.call("bitbadges_configure", {"apiKey": "k1", "baseUrl": "https://x.test"})
        api.error = httpx.UnsupportedProtocol
        result = await gateway.call("bitbadges_getStatus", {})
        assert text_of(result).startswith("Error: Request Error:")

    async def test_unexpected_handler_failure_contained(self):
        async def broken(gateway: Gateway, args: dict[str, Any]) -> Any:
            raise RuntimeError("kaboom")

        gateway = Gateway([], {"bitbadges_broken": broken})
        await gateway.call("bitbadges_configure", {"apiKey": "k1"})
        result = await gateway.call("bitbadges_broken", {})
        assert result == {"content": [{"type": "text", "text": "Error: kaboom"}], "isError": True}

    async def test_non_json_success_returned_as_text(self, configured, api):
        api.payload = "plain text"
        result = await configured.call("bitbadges_getStatus", {})
        assert text_of(result) == json.dumps("plain text")
