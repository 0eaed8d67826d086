"""
Composite operation sequencing.

A composite operation is an ordered list of OperationSteps folded into one
NormalizedResult. Each step carries a continuation policy:

- NORMAL: runs only while every earlier step succeeded; a failure halts the
  chain and becomes the reported result.
- IGNORE_RESULT: always runs; its result is left out of the report.
- USE_FIRST_RESPONSE: always runs; the first recorded result is reported
  instead of this one.

Steps run strictly in order. Each step receives the currently reported
result so it can chain on that result's authorization token.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Callable

import structlog

from adyen_gateway.models import NormalizedResult, RequestValidationError

logger = structlog.get_logger(__name__)


class ContinuationPolicy(str, Enum):
    """How a step's outcome affects the rest of a composite operation."""

    NORMAL = "normal"
    IGNORE_RESULT = "ignore_result"
    USE_FIRST_RESPONSE = "use_first_response"


StepAction = Callable[[NormalizedResult | None], NormalizedResult]


@dataclass(frozen=True)
class OperationStep:
    """A named primitive operation and its continuation policy."""

    name: str
    action: StepAction
    policy: ContinuationPolicy = ContinuationPolicy.NORMAL


class StepRunner:
    """
    Runs OperationSteps and keeps every recorded response.

    Attributes:
        responses: Results of the steps that were recorded, in order
        primary_response: The result the composite reports
    """

    def __init__(self, operation: str) -> None:
        self.operation = operation
        self.responses: list[NormalizedResult] = []
        self.primary_response: NormalizedResult | None = None

    @property
    def halted(self) -> bool:
        return self.primary_response is not None and not self.primary_response.success

    def run(self, steps: list[OperationStep]) -> NormalizedResult:
        for step in steps:
            if step.policy is ContinuationPolicy.NORMAL and self.halted:
                logger.info(
                    "composite_step_skipped",
                    operation=self.operation,
                    step=step.name,
                )
                break
            self._run_step(step)

        if self.primary_response is None:
            raise RuntimeError(f"Composite operation {self.operation} produced no result")
        return self.primary_response

    def _run_step(self, step: OperationStep) -> None:
        try:
            result = step.action(self.primary_response)
        except RequestValidationError as e:
            # Only normal steps surface construction errors
            if step.policy is ContinuationPolicy.NORMAL:
                raise
            logger.warning(
                "composite_step_not_sent",
                operation=self.operation,
                step=step.name,
                error=str(e),
            )
            return

        logger.info(
            "composite_step_completed",
            operation=self.operation,
            step=step.name,
            policy=step.policy.value,
            success=result.success,
        )

        if step.policy is ContinuationPolicy.IGNORE_RESULT:
            return

        self.responses.append(result)
        if step.policy is ContinuationPolicy.USE_FIRST_RESPONSE:
            self.primary_response = self.responses[0]
        else:
            self.primary_response = result


def run_steps(operation: str, steps: list[OperationStep]) -> NormalizedResult:
    """Fold the steps of a composite operation into its reported result."""
    return StepRunner(operation).run(steps)
