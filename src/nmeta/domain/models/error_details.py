"""Error details domain model."""

from pydantic import BaseModel, ConfigDict


class ErrorDetails(BaseModel):
    """Details about a rejected header, including the HTTP status code to answer with."""

    model_config = ConfigDict(frozen=True)

    status_code: int | None = None
    reason: str
