from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from pydantic import BaseModel


def _dump(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump(by_alias=True, mode="json")
    if isinstance(value, Sequence) and not isinstance(value, (str, bytes)):
        return [_dump(entry) for entry in value]
    return value


def envelope(
    data: Any = None,
    *,
    message: str | None = None,
    count: int | None = None,
    **context: Any,
) -> dict[str, Any]:
    """Build the ``{success, message?, data?, count?, ...}`` body of a successful response.

    ``context`` carries listing metadata such as the parent category name or
    the search query; keys are emitted as given.
    """

    body: dict[str, Any] = {"success": True}
    if message is not None:
        body["message"] = message
    body.update({key: value for key, value in context.items() if value is not None})
    if count is not None:
        body["count"] = count
    if data is not None:
        body["data"] = _dump(data)
    return body
