"""Tests for catalog synthesis against tests/fixtures/openapi.yaml."""

import copy
import datetime
import json

from generator.synthesizer import CONFIGURE_TOOL, synthesize


class TestCatalogShape:
    """Test which operations become tools, and in what order."""

    def test_order_follows_document(self, tools):
        assert [t["name"] for t in tools] == [
            "bitbadges_configure",
            "bitbadges_getStatus",
            "bitbadges_getAccount",
            "bitbadges_getBadgeMetadata",
            "bitbadges_getCollections",
            "bitbadges_searchClaims",
        ]

    def test_configure_first(self, tools):
        assert tools[0] == CONFIGURE_TOOL
        assert "metadata" not in tools[0]
        assert tools[0]["inputSchema"]["required"] == ["apiKey"]

    def test_auth_paths_excluded(self, tools):
        paths = [t["metadata"]["path"] for t in tools[1:]]
        assert not any("/auth/" in p or "/oauth/" in p for p in paths)

    def test_operation_without_id_skipped(self, tools):
        assert all(t["metadata"]["path"] != "/no-operation-id" for t in tools[1:])

    def test_names_unique(self, tools):
        names = [t["name"] for t in tools]
        assert len(names) == len(set(names))


class TestDuplicateOperationIds:
    """The first operation registered under a name wins."""

    def test_first_registration_kept(self, tool_by_name):
        tool = tool_by_name("bitbadges_getAccount")
        assert tool["metadata"]["path"] == "/user"
        assert tool["description"] == "Get Account"

    def test_not_duplicated(self, tools):
        assert sum(t["name"] == "bitbadges_getAccount" for t in tools) == 1

    def test_configure_name_reserved(self):
        spec = {"paths": {"/configure": {"post": {"operationId": "configure", "summary": "Hijack"}}}}
        tools = synthesize(spec)
        assert len(tools) == 1
        assert tools[0] == CONFIGURE_TOOL


class TestDescriptors:
    """Test individual descriptor fields."""

    def test_metadata(self, tool_by_name):
        assert tool_by_name("bitbadges_getAccount")["metadata"] == {
            "path": "/user",
            "method": "GET",
            "operationId": "getAccount",
            "tags": ["Accounts"],
            "queryParameters": ["address", "username"],
        }

    def test_method_upper_case(self, tool_by_name):
        assert tool_by_name("bitbadges_getStatus")["metadata"]["method"] == "POST"

    def test_tags_default_empty(self, tool_by_name):
        assert tool_by_name("bitbadges_searchClaims")["metadata"]["tags"] == []

    def test_description_from_summary(self, tool_by_name):
        assert tool_by_name("bitbadges_getStatus")["description"] == "Get Status"

    def test_description_from_description(self, tool_by_name):
        tool = tool_by_name("bitbadges_getBadgeMetadata")
        assert tool["description"] == "Gets the metadata for a specific badge."

    def test_description_fallback(self, tool_by_name):
        assert tool_by_name("bitbadges_searchClaims")["description"] == "Execute searchClaims"

    def test_path_item_parameters(self, tool_by_name):
        schema = tool_by_name("bitbadges_getBadgeMetadata")["inputSchema"]
        assert list(schema["properties"]) == ["collectionId", "badgeId"]
        assert schema["properties"]["badgeId"] == {"type": "number", "description": "badgeId parameter"}
        assert schema["required"] == ["collectionId", "badgeId"]

    def test_versioned_path_kept_in_metadata(self, tool_by_name):
        assert tool_by_name("bitbadges_getCollections")["metadata"]["path"] == "/api/v0/collections"

    def test_ref_body(self, tool_by_name):
        schema = tool_by_name("bitbadges_searchClaims")["inputSchema"]
        assert schema["properties"]["body"] == {"$ref": "#/components/schemas/SearchClaimsPayload"}
        assert schema["required"] == ["cosmosAddress", "body"]

    def test_yaml_dates_normalized(self):
        spec = {
            "paths": {
                "/x": {"get": {"operationId": "getX", "summary": "X", "tags": [datetime.date(2024, 1, 2)]}},
            },
        }
        assert synthesize(spec)[1]["metadata"]["tags"] == ["2024-01-02"]


class TestDeterminism:
    """Synthesis is a pure function of the document."""

    def test_repeat_is_identical(self, spec):
        first = json.dumps(synthesize(spec))
        second = json.dumps(synthesize(spec))
        assert first == second

    def test_input_not_mutated(self, spec):
        before = copy.deepcopy(spec)
        synthesize(spec)
        assert spec == before

    def test_empty_document(self):
        assert synthesize({}) == [CONFIGURE_TOOL]
