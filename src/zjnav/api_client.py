"""Minimal typed client for the zjnav daemon API."""
from typing import Any, Optional, Type, TypeVar

import httpx
from pydantic import BaseModel

T = TypeVar("T", bound=BaseModel)


class APIError(Exception):
    """Non-success response from the daemon."""

    def __init__(self, status_code: int, detail: str):
        self.status_code = status_code
        self.detail = detail
        super().__init__(f"API error {status_code}: {detail}")


def api_call(
    base_url: str,
    method: str,
    path: str,
    data: Optional[BaseModel] = None,
    response_model: Optional[Type[T]] = None,
    timeout: float = 5.0,
) -> Any:
    """Call the daemon and validate the JSON response.

    Args:
        base_url: Daemon URL, e.g. http://127.0.0.1:21591
        method: HTTP method
        path: Request path
        data: Request body model, sent as JSON
        response_model: Model to validate the response with; raw JSON otherwise

    Raises:
        APIError: On a 4xx/5xx response
    """
    kwargs = {}
    if data is not None:
        kwargs["json"] = data.model_dump(mode="json")

    with httpx.Client(base_url=base_url, timeout=timeout) as client:
        response = client.request(method, path, **kwargs)

    if response.status_code >= 400:
        try:
            detail = response.json().get("detail", response.text)
        except ValueError:
            detail = response.text
        raise APIError(response.status_code, str(detail))

    if response_model is not None:
        return response_model.model_validate_json(response.content)
    return response.json()
