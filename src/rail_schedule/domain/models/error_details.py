"""Error details domain model."""

from pydantic import BaseModel, ConfigDict

from rail_schedule.domain.errors import ErrorKind, RailwayError


class ErrorDetails(BaseModel):
    """Details about a rejected operation."""

    model_config = ConfigDict(frozen=True)

    kind: ErrorKind
    reason: str

    @classmethod
    def from_error(cls, error: RailwayError) -> "ErrorDetails":
        return cls(kind=error.kind, reason=str(error))
