"""Operation result domain model."""

from pydantic import BaseModel, ConfigDict

from rail_schedule.domain.models.error_details import ErrorDetails


class OperationResult(BaseModel):
    """Outcome of a service operation: success, or the error that stopped it."""

    model_config = ConfigDict(frozen=True)

    error: ErrorDetails | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls) -> "OperationResult":
        return cls()

    @classmethod
    def failure(cls, error: ErrorDetails) -> "OperationResult":
        return cls(error=error)
