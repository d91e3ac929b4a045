"""ResultRecord — one persisted evaluation outcome."""

from typing import Any

from pydantic import BaseModel, ConfigDict, model_validator

from code_judge.judge.domain.response import TokenUsage

UNNAMED = "Unnamed test"


class ResultRecord(BaseModel):
    """One evaluation outcome as stored in a results file.

    Unknown keys are ignored so that stores written by other evaluation tools
    (promptfoo keeps the description under ``testCase``) still load.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    description: str = UNNAMED
    success: bool
    score: float | None = None
    error: str | None = None
    usage: TokenUsage | None = None

    @model_validator(mode="before")
    @classmethod
    def _lift_test_case_description(cls, data: Any) -> Any:
        if isinstance(data, dict) and not data.get("description"):
            test_case = data.get("testCase")
            if isinstance(test_case, dict) and test_case.get("description"):
                return {**data, "description": test_case["description"]}
        return data


type ResultSet = list[ResultRecord]
