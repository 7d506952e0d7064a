"""Map handler outcomes onto HTTP responses."""

from __future__ import annotations

from pydantic import BaseModel
from starlette.responses import JSONResponse, Response

from user_directory.core.services import (
    BadRequest,
    NotFound,
    Outcome,
    Success,
    ValidationFailed,
)

VALIDATION_TITLE = "One or more validation errors occurred."


def render_outcome(outcome: Outcome, location: str | None = None) -> Response:
    """Build the response for ``outcome``.

    ``location`` is sent as the ``Location`` header of a 201 response.
    """
    if isinstance(outcome, Success):
        if outcome.value is None:
            return Response(status_code=outcome.status_code)
        content = (
            outcome.value.model_dump(mode="json", by_alias=True)
            if isinstance(outcome.value, BaseModel)
            else outcome.value
        )
        headers = {"Location": location} if outcome.created and location else None
        return JSONResponse(
            status_code=outcome.status_code, content=content, headers=headers
        )

    if isinstance(outcome, ValidationFailed):
        return JSONResponse(
            status_code=outcome.status_code,
            content={
                "title": VALIDATION_TITLE,
                "status": outcome.status_code,
                "errors": outcome.errors,
            },
        )

    if isinstance(outcome, (BadRequest, NotFound)):
        return JSONResponse(
            status_code=outcome.status_code, content={"error": outcome.message}
        )

    raise TypeError(f"Unknown outcome type: {type(outcome).__name__}")
