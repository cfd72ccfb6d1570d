"""Structured generation with per-task fallback.

Both uses of the hosted language model (interpreting the query and
composing the reply) go through this service. Each use is a
GenerationTask that knows how to build its prompt, parse the model
output and produce a deterministic fallback. The service makes exactly
one model call per task and never retries.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Protocol, TypeVar

from ..domain.errors import GenerationError
from ..ports.generation import TextGeneratorPort

T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)


class GenerationTask(Protocol[T_co]):
    """One typed use of the language model.

    Attributes:
        name: Short task name used in logs
    """

    name: str

    def build_prompt(self) -> str:
        """Return the full prompt text."""
        ...

    def parse(self, text: str) -> T_co:
        """Turn raw model output into the task's result.

        Raises:
            ValueError: If the output is malformed.
        """
        ...

    def fallback(self) -> T_co:
        """Deterministic result used when generation fails."""
        ...


@dataclass
class StructuredGenerationService:
    """Runs GenerationTasks against a TextGeneratorPort.

    Attributes:
        generator: The hosted model adapter
    """

    generator: TextGeneratorPort

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def run(self, task: GenerationTask[T]) -> T:
        """Generate, parse, and fall back on any failure.

        Args:
            task: The generation task to run.

        Returns:
            The parsed model output, or ``task.fallback()`` when the
            call fails or its output cannot be parsed.
        """
        try:
            text = self.generator.generate(task.build_prompt())
            result = task.parse(text)
        except GenerationError as e:
            self._logger.warning(
                "Generation failed, using fallback",
                extra={
                    "task": task.name,
                    "status_code": e.status_code,
                    "error": str(e),
                },
            )
            return task.fallback()
        except ValueError as e:
            self._logger.warning(
                "Generation output malformed, using fallback",
                extra={"task": task.name, "error": str(e)},
            )
            return task.fallback()

        self._logger.debug("Generation task succeeded", extra={"task": task.name})
        return result
