from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Iterable, List, Protocol, Sequence, Union

from .context import ProvisionContext

logger = logging.getLogger(__name__)

Message = Union[str, Callable[[ProvisionContext], str]]


@dataclass(frozen=True)
class Action:
    """One external action plus the messages reported around it.

    success may be a callable so it can name values the action produced.
    """

    description: str
    success: Message
    failure: str
    run: Callable[[ProvisionContext], None]


class Step(Protocol):
    """An ordered stage producing its actions lazily.

    Actions are generated one at a time so later actions can read values
    (the loop device) stored on the context by earlier ones.
    """

    step_id: str

    def actions(self, ctx: ProvisionContext) -> Iterable[Action]:
        ...


class StepFailed(RuntimeError):
    def __init__(self, step_id: str, message: str) -> None:
        self.step_id = step_id
        self.message = message
        super().__init__(f"{step_id}: {message}")


@dataclass(frozen=True)
class PipelineResult:
    ran_steps: List[str]
    actions_run: int


def _render(message: Message, ctx: ProvisionContext) -> str:
    return message(ctx) if callable(message) else message


def run_action(ctx: ProvisionContext, action: Action, *, step_id: str) -> None:
    """Run one action and report it; raise StepFailed on any failure.

    Commands signal failure with CommandError (a RuntimeError); file writes
    and missing executables surface as OSError.
    """

    ctx.reporter.announce(action.description)
    try:
        action.run(ctx)
    except (RuntimeError, OSError) as e:
        logger.error("%s failed: %s", step_id, e)
        ctx.reporter.failure(action.failure)
        raise StepFailed(step_id, action.failure) from e

    success = _render(action.success, ctx)
    ctx.reporter.success(success)
    ctx.completed.append(success)


def run_pipeline(*, ctx: ProvisionContext, steps: Sequence[Step]) -> PipelineResult:
    """Run steps in order, stopping at the first failed action."""

    ran: List[str] = []
    count = 0

    for step in steps:
        logger.info("Running step %s", step.step_id)
        for action in step.actions(ctx):
            run_action(ctx, action, step_id=step.step_id)
            count += 1
        ran.append(step.step_id)

    logger.info("Pipeline finished: %d steps, %d actions", len(ran), count)
    return PipelineResult(ran_steps=ran, actions_run=count)
