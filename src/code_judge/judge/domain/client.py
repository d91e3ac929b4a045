"""JudgeClient Protocol — structural interface for all judge implementations."""

from typing import Protocol

from code_judge.judge.domain.response import JudgeCallResult


class JudgeClient(Protocol):
    """Sends one prompt to the judge and waits for one text response.

    Implementations must report transport errors and timeouts through an
    unsuccessful JudgeCallResult rather than raising.
    """

    @property
    def model(self) -> str: ...

    async def complete(self, prompt: str, label: str = "") -> JudgeCallResult: ...
