"""Session: one variable store plus the results it has produced."""

from __future__ import annotations

from dataclasses import dataclass, field

from .environment import Environment
from .evaluator import evaluate
from .lexer import tokenize
from .parser import parse
from .values import Empty, Value


def evaluate_line(text: str, environment: Environment | None = None) -> Value:
    """One-shot entry point: tokenize, parse and evaluate *text*.

    Uses a fresh Environment unless one is supplied, so bindings only
    persist when the caller keeps passing the same store.
    """
    if environment is None:
        environment = Environment()
    return evaluate(parse(tokenize(text)), environment)


@dataclass
class Session:
    """Evaluates successive lines against a single Environment."""

    environment: Environment = field(default_factory=Environment)
    results: list[Value] = field(default_factory=list)

    # -- Convenience accessors ------------------------------------------

    @property
    def variables(self) -> dict[str, Value]:
        return self.environment.variables

    @property
    def last_result(self) -> Value:
        """The value produced by the most recent run(), or Empty."""
        return self.results[-1] if self.results else Empty

    # -- Evaluation -----------------------------------------------------

    def run(self, text: str) -> Value:
        result = evaluate_line(text, self.environment)
        self.results.append(result)
        return result

    def reset(self) -> None:
        """Forget all variables and results."""
        self.environment.clear()
        self.results.clear()
