"""Landing page."""

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse, Response

from gox.app.api.deps import get_output_format
from gox.app.core.responses import render_message_page

WELCOME_MESSAGE = "Welcome to gox."

router = APIRouter()


@router.get("/", response_class=PlainTextResponse)
async def home(fmt: str = Depends(get_output_format)) -> Response:
    if fmt == "html":
        return render_message_page(WELCOME_MESSAGE)
    return PlainTextResponse(WELCOME_MESSAGE)
