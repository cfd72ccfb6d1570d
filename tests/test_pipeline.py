"""Tests for the one-shot pipeline helpers."""

from pathlib import Path

from fakes import (
    FakeCapture,
    FakeDirections,
    FakeSynthesizer,
    FakeTextGenerator,
    bus_step,
    directions_response,
)

from voice_transit.config import AppConfig
from voice_transit.container import Container
from voice_transit.domain.errors import GenerationError
from voice_transit.locales import format_route_message
from voice_transit.pipeline import answer_transit_query, transcribe_audio_file
from voice_transit.ports.directions import DirectionsPort
from voice_transit.ports.generation import TextGeneratorPort
from voice_transit.ports.speech import SpeechCapturePort
from voice_transit.services import SpeechOutputService


def make_container(synthesizer=None, capture=None):
    container = Container.create_default(AppConfig(default_language="hi"))
    container.register(
        TextGeneratorPort,
        lambda: FakeTextGenerator(GenerationError("offline"), GenerationError("offline")),
    )
    container.register(
        DirectionsPort, lambda: FakeDirections(directions_response([bus_step()]))
    )
    container.register(SpeechCapturePort, lambda: capture or FakeCapture())
    container.register(
        SpeechOutputService, lambda: SpeechOutputService([synthesizer or FakeSynthesizer()])
    )
    return container


class TestAnswerTransitQuery:
    def test_uses_default_language(self):
        outcome = answer_transit_query("Majestic se KR Market tak", container=make_container())

        assert outcome.context.language == "hi"
        assert outcome.response == format_route_message(outcome.results[0], "hi")

    def test_explicit_language(self):
        outcome = answer_transit_query(
            "Majestic to KR Market", "en-IN", container=make_container()
        )

        assert outcome.context.language == "en"
        assert outcome.results[0].bus_number == "335E"

    def test_speak(self):
        synthesizer = FakeSynthesizer()

        outcome = answer_transit_query(
            "Majestic to KR Market", "ta", speak=True, container=make_container(synthesizer)
        )

        assert synthesizer.spoken == [(outcome.response, "ta-IN")]

    def test_silent_by_default(self):
        synthesizer = FakeSynthesizer()

        answer_transit_query("Majestic to KR Market", "en", container=make_container(synthesizer))

        assert synthesizer.spoken == []


class TestTranscribeAudioFile:
    def test_uses_language_locale(self):
        capture = FakeCapture("Majestic to KR Market")

        result = transcribe_audio_file(
            Path("question.wav"), "kn", container=make_container(capture=capture)
        )

        assert result.full_text == "Majestic to KR Market"
        assert capture.locales == ["kn-IN"]
