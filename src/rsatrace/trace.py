"""Step tracing for the encryption and decryption pipelines.

Pipelines report each structural step to an optional sink. Steps are numbered from 1, handed over synchronously and
never reordered.

Typical usage example:

    steps = []
    c = pub.encrypt("Hi", on_step=steps.append)
    for step in steps:
        print(step.index, step.name, step.value)
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import typing

StepStatus = typing.Literal["pending", "active", "completed"]


class TraceStep(typing.NamedTuple):
    index: int
    name: str
    description: str
    status: StepStatus
    value: str | None = None
    details: str | None = None


StepCallback = typing.Callable[[TraceStep], None]


def snapshot(text: str, limit: int = 50) -> str:
    """Shorten `text` for display, marking the cut with an ellipsis."""
    if len(text) > limit:
        return text[:limit] + "..."
    return text


class Tracer:
    """Numbers steps and forwards them to the consumer callback.

    Attributes:
        steps: Every step recorded so far, in order.
    """

    def __init__(self, on_step: StepCallback | None = None) -> None:
        self.on_step = on_step
        self.steps: list[TraceStep] = []

    def record(self,
               name: str,
               description: str,
               value: str | None = None,
               details: str | None = None,
               status: StepStatus = "active") -> TraceStep:
        """Append a step and hand it to the callback, if any.

        Args:
            name: Short step label.
            description: What the step did.
            value: Optional snapshot of the step's result.
            details: Optional free-text annotation.
            status: Step status. Defaults to "active".

        Returns:
            The recorded step.
        """
        step = TraceStep(len(self.steps) + 1, name, description, status, value, details)
        self.steps.append(step)
        if self.on_step is not None:
            self.on_step(step)
        return step

    def complete(self, description: str, value: str | None = None, details: str | None = None) -> TraceStep:
        """Record the terminating step of a run."""
        return self.record("Complete", description, value, details, status="completed")

