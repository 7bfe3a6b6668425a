"""
Response builders shared by the MCP tool handlers.

Tools answer with a content array of typed items. Failures set ``isError`` so
the client can tell an execution failure from a protocol error; successes may
carry structured ``data`` next to the human-readable text.
"""

from typing import Any


def success_response(text: str, data: dict[str, Any] | None = None) -> dict[str, Any]:
    response: dict[str, Any] = {"content": [{"type": "text", "text": text}]}
    if data is not None:
        response["data"] = data
    return response


def error_response(text: str) -> dict[str, Any]:
    return {"isError": True, "content": [{"type": "text", "text": text}]}
