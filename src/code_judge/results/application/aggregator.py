"""Result Aggregator — reduces a ResultSet to AggregateStats."""

import statistics

from code_judge.results.domain.record import ResultSet
from code_judge.results.domain.stats import AggregateStats


def aggregate(records: ResultSet) -> AggregateStats:
    """Compute pass/fail counts, average score and pass rate.

    Only positive scores count as reported: records without one are excluded
    from the average but still counted in the totals. An empty set gives a
    pass rate of 0. Failed records are kept in input order for display.
    """
    total = len(records)
    failures = [r for r in records if not r.success]
    passed = total - len(failures)

    scores = [r.score for r in records if r.score is not None and r.score > 0]
    average_score = statistics.fmean(scores) if scores else 0.0
    pass_rate = passed * 100 / total if total else 0.0

    return AggregateStats(
        total=total,
        passed=passed,
        failed=len(failures),
        average_score=average_score,
        pass_rate=pass_rate,
        failures=failures,
    )
