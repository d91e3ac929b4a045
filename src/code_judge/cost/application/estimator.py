"""Cost Estimator — converts token usage into USD using a pricing table."""

from code_judge.config.domain.pricing import ModelPricing, PricingConfig
from code_judge.cost.domain.estimate import CostEstimate
from code_judge.judge.domain.response import TokenUsage
from code_judge.results.domain.record import ResultSet

_PER_MILLION = 1_000_000


class CostEstimator:
    """Prices judge usage. Unknown models fall back to the default entry."""

    def __init__(self, pricing: PricingConfig) -> None:
        self._pricing = pricing

    def pricing_for(self, model: str) -> ModelPricing:
        """Exact id, then the id without a ``provider/`` prefix, then the default."""
        models = self._pricing.models
        if model in models:
            return models[model]
        bare = model.rsplit("/", 1)[-1]
        if bare in models:
            return models[bare]
        return models[self._pricing.default_model]

    def cost_for_usage(self, usage: TokenUsage, model: str) -> float:
        return self.estimate_usage(usage=usage, model=model).total_cost

    def estimate_usage(
        self, usage: TokenUsage, model: str, evaluations: int = 1
    ) -> CostEstimate:
        pricing = self.pricing_for(model=model)
        return CostEstimate(
            model=model,
            pricing=pricing,
            evaluations=evaluations,
            input_tokens=usage.input_tokens,
            output_tokens=usage.output_tokens,
            input_cost=usage.input_tokens / _PER_MILLION * pricing.input_per_million,
            output_cost=usage.output_tokens
            / _PER_MILLION
            * pricing.output_per_million,
        )

    def estimate_records(self, records: ResultSet, model: str) -> CostEstimate:
        """Estimate the cost of the run that produced *records*.

        Records carrying real usage contribute it; the rest contribute the
        configured per-evaluation token estimate.
        """
        fallback = TokenUsage(
            input_tokens=self._pricing.estimated_input_tokens,
            output_tokens=self._pricing.estimated_output_tokens,
        )
        total = TokenUsage()
        estimated = False
        for record in records:
            if record.usage is None:
                estimated = True
                total = total + fallback
            else:
                total = total + record.usage

        estimate = self.estimate_usage(
            usage=total, model=model, evaluations=len(records)
        )
        return estimate.model_copy(update={"estimated": estimated})
