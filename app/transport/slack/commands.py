"""Slack slash command endpoint."""

import logging

from fastapi import APIRouter, Form, Request
from fastapi.responses import JSONResponse

from app.providers import DIContainer

logger = logging.getLogger(__name__)

router = APIRouter()


def get_container(request: Request) -> DIContainer:
    """Get DI container from app state."""
    return request.app.state.container


@router.post("/command")
async def slash_command(
    request: Request,
    user_name: str = Form(...),
    text: str = Form(""),
) -> JSONResponse:
    """Handle form-encoded slash command payload.

    Other Slack fields (token, channel_id, response_url, ...) are ignored.
    """
    container = get_container(request)
    args = text.split()
    logger.debug(f"Command from {user_name}: {args}")

    response, status = await container.dispatcher.handle(user_name, args)
    return JSONResponse(content=response.model_dump(), status_code=status)
