"""
Response rendering shared by all handlers.

Successful payloads are written either as pretty‑printed JSON or as a
small HTML page that embeds the same JSON with syntax highlighting for
viewing in a browser.  Errors are always JSON so that clients can rely
on a single envelope: ``{"detail": "<message>"}``.
"""

import html
import json
from typing import Any, Mapping, Optional

from fastapi.encoders import jsonable_encoder
from fastapi.responses import HTMLResponse, JSONResponse, Response

JSON_INDENT = 2

HTML_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>Gox</title>
    <link href="https://cdnjs.cloudflare.com/ajax/libs/prism/1.25.0/themes/prism.min.css" rel="stylesheet" />
    <script src="https://cdnjs.cloudflare.com/ajax/libs/prism/1.25.0/prism.min.js"></script>
    <script src="https://cdnjs.cloudflare.com/ajax/libs/prism/1.25.0/components/prism-json.min.js"></script>
</head>
<body>
    <h1>G0X</h1>
    {content}
</body>
</html>
"""

JSON_BLOCK = '<pre><code class="language-json">{body}</code></pre>'
MESSAGE_BLOCK = "<p>{message}</p>"


class PrettyJSONResponse(JSONResponse):
    """JSON response indented with two spaces."""

    def render(self, content: Any) -> bytes:
        return json.dumps(
            content,
            ensure_ascii=False,
            allow_nan=False,
            indent=JSON_INDENT,
        ).encode("utf-8")


def to_pretty_json(data: Any) -> str:
    """Serialize ``data`` (models, UUIDs and datetimes included) to indented JSON."""
    return json.dumps(jsonable_encoder(data), ensure_ascii=False, indent=JSON_INDENT)


def render_json_page(data: Any, status_code: int = 200) -> HTMLResponse:
    """Wrap the pretty JSON form of ``data`` in an HTML page."""
    body = HTML_TEMPLATE.format(content=JSON_BLOCK.format(body=html.escape(to_pretty_json(data))))
    return HTMLResponse(content=body, status_code=status_code)


def render(data: Any, fmt: str = "json", status_code: int = 200) -> Response:
    """Render ``data`` in the requested output format."""
    if fmt == "html":
        return render_json_page(data, status_code=status_code)
    return PrettyJSONResponse(content=jsonable_encoder(data), status_code=status_code)


def error_response(
    status_code: int, message: str, headers: Optional[Mapping[str, str]] = None
) -> PrettyJSONResponse:
    return PrettyJSONResponse(content={"detail": message}, status_code=status_code, headers=headers)


def render_message_page(message: str, status_code: int = 200) -> HTMLResponse:
    """HTML page with a single paragraph of text under the ``G0X`` heading."""
    page = HTML_TEMPLATE.format(content=MESSAGE_BLOCK.format(message=html.escape(message)))
    return HTMLResponse(content=page, status_code=status_code)
