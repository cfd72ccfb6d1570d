"""Tests for StructuredGenerationService."""

from dataclasses import dataclass, field
from typing import List

from fakes import FakeTextGenerator

from voice_transit.domain.errors import GenerationError
from voice_transit.services.structured_generation import StructuredGenerationService


@dataclass
class UpperTask:
    text: str
    name: str = "upper"
    parsed: List[str] = field(default_factory=list)

    def build_prompt(self) -> str:
        return f"shout: {self.text}"

    def parse(self, text: str) -> str:
        self.parsed.append(text)
        if text == "bad":
            raise ValueError("bad output")
        return text.upper()

    def fallback(self) -> str:
        return "fallback"


class TestStructuredGenerationService:
    def test_returns_parsed_output(self):
        generator = FakeTextGenerator("hello")
        service = StructuredGenerationService(generator)

        assert service.run(UpperTask("hi")) == "HELLO"
        assert generator.prompts == ["shout: hi"]

    def test_generation_error_uses_fallback(self):
        generator = FakeTextGenerator(GenerationError("down", status_code=503))
        task = UpperTask("hi")

        assert StructuredGenerationService(generator).run(task) == "fallback"
        assert task.parsed == []

    def test_malformed_output_uses_fallback(self):
        generator = FakeTextGenerator("bad")

        assert StructuredGenerationService(generator).run(UpperTask("hi")) == "fallback"

    def test_single_call_no_retry(self):
        generator = FakeTextGenerator(GenerationError("down"), "hello")

        StructuredGenerationService(generator).run(UpperTask("hi"))

        assert len(generator.prompts) == 1
