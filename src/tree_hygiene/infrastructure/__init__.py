"""Infrastructure: external process orchestration and analyzer invocations."""

from tree_hygiene.infrastructure.process import (
    EvalResult,
    describe_command,
    eval_command,
    run_command,
)

__all__ = [
    "EvalResult",
    "describe_command",
    "eval_command",
    "run_command",
]
