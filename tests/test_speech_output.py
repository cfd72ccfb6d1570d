"""Tests for SpeechOutputService."""

from fakes import FakeSynthesizer

from voice_transit.services.speech_output import SpeechOutputService


class TestSpeechOutputService:
    def test_first_synthesizer_wins(self):
        hosted, local = FakeSynthesizer(), FakeSynthesizer()

        assert SpeechOutputService([hosted, local]).speak("hello", "en-IN") is True
        assert hosted.spoken == [("hello", "en-IN")]
        assert local.spoken == []

    def test_falls_back_to_local(self):
        hosted, local = FakeSynthesizer(fail=True, engine="hosted"), FakeSynthesizer()

        assert SpeechOutputService([hosted, local]).speak("नमस्ते", "hi-IN") is True
        assert local.spoken == [("नमस्ते", "hi-IN")]

    def test_last_failure_is_absorbed(self):
        service = SpeechOutputService([FakeSynthesizer(fail=True), FakeSynthesizer(fail=True)])

        assert service.speak("hello", "en-IN") is False

    def test_empty_text_is_not_spoken(self):
        synthesizer = FakeSynthesizer()

        assert SpeechOutputService([synthesizer]).speak("", "en-IN") is False
        assert synthesizer.spoken == []
