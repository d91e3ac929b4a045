"""EvaluationItem — one labelled request in a batch."""

from pydantic import BaseModel, Field

from code_judge.prompt.domain.request import EvaluationRequest


class EvaluationItem(BaseModel, frozen=True):
    description: str = Field(min_length=1)
    request: EvaluationRequest
