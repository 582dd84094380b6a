"""Tests for the codegen module and the generator CLI."""

import ast
from pathlib import Path

from generator.__main__ import main as generator_main
from generator.codegen import (
    OUTPUT_PATH,
    build_handlers,
    render,
    render_endpoint,
    strip_version_prefix,
    write_server,
)
from generator.loader import SPEC_PATH, get_version, load_spec
from generator.synthesizer import synthesize


FIXTURE_SPEC = Path(__file__).parent / "fixtures" / "openapi.yaml"


class TestStripVersionPrefix:
    def test_strips_api_version(self):
        assert strip_version_prefix("/api/v0/collections") == "/collections"

    def test_other_versions(self):
        assert strip_version_prefix("/api/v12/status") == "/status"

    def test_unprefixed_unchanged(self):
        assert strip_version_prefix("/user") == "/user"

    def test_only_leading_segment(self):
        assert strip_version_prefix("/api/v0/api/v0/x") == "/api/v0/x"

    def test_not_in_middle(self):
        assert strip_version_prefix("/proxy/api/v0/x") == "/proxy/api/v0/x"


class TestRenderEndpoint:
    """Path templates become f-string expressions over the call arguments."""

    def test_static(self):
        assert render_endpoint("/status") == 'f"/status"'

    def test_placeholders(self):
        assert render_endpoint("/collection/{collectionId}/{badgeId}/metadata") == (
            "f\"/collection/{path_arg(args, 'collectionId')}/{path_arg(args, 'badgeId')}/metadata\""
        )

    def test_prefix_removed(self):
        assert render_endpoint("/api/v0/collections") == 'f"/collections"'

    def test_stray_brace_escaped(self):
        assert render_endpoint("/odd}path") == 'f"/odd}}path"'

    def test_quote_escaped(self):
        assert render_endpoint('/say"hi"') == 'f"/say\\"hi\\""'

    def test_expression_parses(self):
        ast.parse(render_endpoint("/claims/search/{cosmosAddress}"), mode="eval")


class TestBuildHandlers:
    def test_configure_has_no_handler(self, tools):
        assert "bitbadges_configure" not in [h["tool"] for h in build_handlers(tools)]

    def test_handler_fields(self, tools):
        handler = next(h for h in build_handlers(tools) if h["tool"] == "bitbadges_getAccount")
        assert handler == {
            "tool": "bitbadges_getAccount",
            "function": "handle_get_account",
            "description": "Get Account",
            "endpoint": 'f"/user"',
            "method": "GET",
            "query": ["address", "username"],
        }

    def test_function_names_unique(self):
        tools = [
            {"name": f"bitbadges_{op}", "description": op,
             "metadata": {"path": "/x", "method": "GET", "operationId": op}}
            for op in ("getX", "get_x")
        ]
        functions = [h["function"] for h in build_handlers(tools)]
        assert functions == ["handle_get_x", "handle_get_x_2"]


class TestRender:
    """Test the rendered server module."""

    def test_valid_python(self, tools):
        ast.parse(render(tools))

    def test_byte_identical(self, tools):
        assert render(tools, api_version="2.1.0") == render(tools, api_version="2.1.0")

    def test_header_mentions_version_and_count(self, tools):
        source = render(tools, api_version="2.1.0")
        assert "version 2.1.0, 6 tools" in source

    def test_get_handlers_send_no_body(self, tools):
        source = render(tools)
        module = ast.parse(source)
        for node in module.body:
            if isinstance(node, ast.AsyncFunctionDef) and node.name in (
                "handle_get_account",
                "handle_get_badge_metadata",
            ):
                assert "body=" not in ast.get_source_segment(source, node)

    def test_post_handlers_forward_args(self, tools):
        source = render(tools)
        assert "gateway.request(endpoint, 'POST', body=args or {})" in source

    def test_get_with_query(self, tools):
        source = render(tools)
        assert "query=query_args(args, ['address', 'username'])" in source

    def test_write_replaces_file(self, tmp_path):
        path = tmp_path / "out" / "server.py"
        write_server("old = 1\n", path)
        write_server("new = 2\n", path)
        assert path.read_text(encoding="utf-8") == "new = 2\n"


class TestGeneratedModule:
    """Test the imported module rendered from the fixture spec."""

    def test_catalog(self, generated, tools):
        assert generated.TOOLS == tools

    def test_handlers_cover_catalog(self, generated, tools):
        assert set(generated.HANDLERS) == {t["name"] for t in tools[1:]}

    def test_handler_docstring(self, generated):
        assert generated.handle_get_status.__doc__ == "Get Status"

    def test_create_gateway(self, generated):
        gateway = generated.create_gateway()
        assert gateway.list() == generated.TOOLS
        assert gateway.config is None


class TestCli:
    """python -m generator with a local spec file."""

    def test_generate_from_local_spec(self, tmp_path, capsys):
        output = tmp_path / "server.py"
        assert generator_main(["--spec", str(FIXTURE_SPEC), "--output", str(output)]) == 0
        assert output.exists()
        ast.parse(output.read_text(encoding="utf-8"))
        assert "(6 tools, 9 paths)" in capsys.readouterr().out


class TestCommittedServer:
    """generated/server.py is the rendering of spec/openapi.yaml."""

    def test_matches_snapshot(self):
        spec = load_spec(SPEC_PATH)
        expected = render(synthesize(spec), api_version=get_version(spec))
        assert OUTPUT_PATH.read_text(encoding="utf-8") == expected

    def test_importable(self):
        from generated import server

        tools = synthesize(load_spec(SPEC_PATH))
        assert server.TOOLS == tools
        assert set(server.HANDLERS) == {t["name"] for t in tools[1:]}
        assert server.create_gateway().list() == tools

    def test_chat_tools_present(self):
        from bitbadges_mcp.chat import ACCOUNT_TOOL, COLLECTION_TOOL, SEARCH_TOOL, STATUS_TOOL
        from generated import server

        for name in (STATUS_TOOL, SEARCH_TOOL, ACCOUNT_TOOL, COLLECTION_TOOL):
            assert name in server.HANDLERS
