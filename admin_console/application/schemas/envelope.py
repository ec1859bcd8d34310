"""Response envelope used by every collection endpoint."""

from typing import Any

from pydantic import BaseModel, ConfigDict


class ApiEnvelope(BaseModel):
    """``{success, data, message?, count?}`` — the conventional response body."""

    model_config = ConfigDict(extra="ignore")

    success: bool = True
    data: Any = None
    message: str | None = None
    count: int | None = None
