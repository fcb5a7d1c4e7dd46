"""Pydantic schemas for challenge attempts."""

from pydantic import BaseModel, Field

from lingo.domain.progress.outcomes import AttemptOutcome, OutcomeKind


class AttemptRequest(BaseModel):
    """Attempt whose correctness the client already determined."""

    correct: bool = Field(..., description="Whether the selected option was correct")


class AnswerRequest(BaseModel):
    """Attempt by selected option; correctness is decided server-side."""

    option_id: int = Field(..., ge=0, description="ID of the selected option")


class AttemptOutcomeResponse(BaseModel):
    """Outcome of an attempt. Blocking outcomes are reported here, not as errors."""

    outcome: OutcomeKind = Field(..., description="Which rule applied")
    hearts: int = Field(..., ge=0, le=5, description="Hearts after the attempt")
    points: int = Field(..., ge=0, description="Points after the attempt")
    state_changed: bool = Field(..., description="Whether anything was written")

    @classmethod
    def from_domain(cls, outcome: AttemptOutcome) -> "AttemptOutcomeResponse":
        return cls(
            outcome=outcome.kind,
            hearts=outcome.hearts,
            points=outcome.points,
            state_changed=outcome.mutates_state,
        )
