"""Pydantic models for calculation requests, responses and evaluation outcomes."""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from calculator_service.common.errors import FailureKind


class CalculateRequest(BaseModel):
    """JSON body accepted by the calculate endpoint."""

    expression: str = Field(default="", description="Arithmetic expression as a string")


class CalculateResponse(BaseModel):
    """JSON body returned for a successful calculation."""

    result: str = Field(..., description="Evaluated result in shortest decimal form")


class ErrorResponse(BaseModel):
    """JSON body returned for any failed request."""

    error: str = Field(..., description="Failure message for the client")


class EvaluationOutcome(BaseModel):
    """
    Tagged result of an evaluation: either a numeric result or a failure kind.

    Callers switch on ``failure`` rather than inspecting message text.
    """

    model_config = ConfigDict(frozen=True)

    expression: str = Field(..., description="Original expression as received")
    result: Optional[float] = Field(default=None, description="Evaluated numeric result")
    failure: Optional[FailureKind] = Field(default=None, description="Failure category if evaluation failed")

    @property
    def ok(self) -> bool:
        """True when the evaluation produced a result."""
        return self.failure is None
