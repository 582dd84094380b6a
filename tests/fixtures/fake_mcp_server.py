"""Stand-in MCP server for the relay tests.

Speaks line-delimited JSON-RPC on stdio. Tool behaviour by name:

  silent   never replies
  slow     replies after arguments["delay"] seconds
  fail     replies with a JSON-RPC error
  crash    exits with status 3 without replying
  history  replies with the names of every tools/call received so far
  whoami   replies with the apiKey of the latest bitbadges_configure
  *        echoes {"name", "arguments"} back as text
"""

import json
import sys
import threading
import time

_lock = threading.Lock()
_calls = []
_api_key = {"current": ""}


def send(message):
    with _lock:
        sys.stdout.write(json.dumps(message) + "\n")
        sys.stdout.flush()


def text(value):
    return {"content": [{"type": "text", "text": value}]}


def reply(request_id, result):
    send({"jsonrpc": "2.0", "id": request_id, "result": result})


def reply_later(request_id, delay, result):
    time.sleep(delay)
    reply(request_id, result)


def call_tool(request_id, params):
    name = params.get("name")
    arguments = params.get("arguments") or {}
    _calls.append(name)

    if name == "silent":
        return
    if name == "slow":
        threading.Thread(
            target=reply_later,
            args=(request_id, float(arguments.get("delay", 1.0)), text("late")),
            daemon=True,
        ).start()
        return
    if name == "fail":
        send({"jsonrpc": "2.0", "id": request_id, "error": {"code": -32000, "message": "Tool exploded"}})
        return
    if name == "crash":
        sys.exit(3)
    if name == "bitbadges_configure":
        _api_key["current"] = arguments.get("apiKey", "")
    if name == "whoami":
        reply(request_id, text(_api_key["current"]))
        return
    if name == "history":
        reply(request_id, text(json.dumps(_calls)))
        return
    reply(request_id, text(json.dumps({"name": name, "arguments": arguments})))


def handle(request):
    method = request.get("method")
    request_id = request.get("id")
    params = request.get("params") or {}

    if request_id is None:
        return
    if method == "initialize":
        reply(request_id, {
            "protocolVersion": params.get("protocolVersion"),
            "capabilities": {"tools": {}},
            "serverInfo": {"name": "fake-mcp", "version": "0.0.0"},
        })
    elif method == "tools/list":
        reply(request_id, {"tools": [{"name": "echo", "inputSchema": {"type": "object"}}]})
    elif method == "tools/call":
        call_tool(request_id, params)
    else:
        send({"jsonrpc": "2.0", "id": request_id, "error": {"code": -32601, "message": "Method not found"}})


def main():
    print("fake mcp server starting", file=sys.stderr, flush=True)
    sys.stdout.write("banner line that is not JSON\n")
    sys.stdout.flush()
    for line in sys.stdin:
        line = line.strip()
        if line:
            handle(json.loads(line))


if __name__ == "__main__":
    main()
