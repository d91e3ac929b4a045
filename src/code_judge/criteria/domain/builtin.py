"""Built-in rubrics: single code output review and whole-project review."""

from code_judge.criteria.domain.criteria import CriteriaSpec, Criterion

CODE_REVIEW_CRITERIA = CriteriaSpec(
    name="code-review",
    criteria=(
        Criterion(
            name="correctness",
            description="Does it solve the task correctly?",
        ),
        Criterion(
            name="completeness",
            description="Are all requirements met?",
        ),
        Criterion(
            name="code_quality",
            description="Is it maintainable, readable, follows best practices?",
        ),
        Criterion(
            name="token_efficiency",
            description="Is the code concise without being cryptic?",
        ),
        Criterion(
            name="error_handling",
            description="Are errors handled properly with context?",
        ),
        Criterion(
            name="security",
            description="Any security issues or vulnerabilities?",
        ),
    ),
)

PROJECT_CRITERIA = CriteriaSpec(
    name="project-review",
    role="You are an expert code reviewer evaluating a software project's quality.",
    criteria=(
        Criterion(
            name="token_efficiency",
            description="Files under 500 lines, functions under 100 lines, "
            "no duplication.",
        ),
        Criterion(
            name="code_quality",
            description="Strict typing, explicit imports, error handling with "
            "context, consistent naming.",
        ),
        Criterion(
            name="architecture",
            description="Modular design, separation of concerns, clear data flow.",
        ),
        Criterion(
            name="production_readiness",
            description="Tests, documentation and comprehensive error handling.",
        ),
        Criterion(
            name="business_value",
            description="Solves a real problem in a cost- and time-efficient way.",
        ),
    ),
    guidance="Return ONLY the JSON object. The overall_score is the average of "
    "the criterion scores.",
)

BUILTIN_CRITERIA: dict[str, CriteriaSpec] = {
    CODE_REVIEW_CRITERIA.name: CODE_REVIEW_CRITERIA,
    PROJECT_CRITERIA.name: PROJECT_CRITERIA,
}
