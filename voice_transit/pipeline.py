"""One-shot entry points over the default container.

These helpers are reused by the front-ends (launcher, gradio app) and
run a single query without a voice session.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Union

from .container import Container, get_container
from .domain.models import PipelineOutcome, SessionContext, TranscriptionResult
from .locales import get_language, speech_locale
from .ports.speech import SpeechCapturePort
from .services import SpeechOutputService, TransitQueryPipeline

logger = logging.getLogger(__name__)


def _language_tag(language: Optional[str], container: Container) -> str:
    return get_language(language or container.config.default_language).tag


def answer_transit_query(
    sentence: str,
    language: Optional[str] = None,
    speak: bool = False,
    *,
    container: Optional[Container] = None,
) -> PipelineOutcome:
    """Answer one transit question given as text.

    Args:
        sentence: The question, e.g. "Majestic to KR Market".
        language: Language tag; defaults to the configured language.
        speak: Also speak the response aloud.
        container: Container override (defaults to the global one).

    Returns:
        PipelineOutcome with the response and bus rides.
    """
    container = container or get_container()
    tag = _language_tag(language, container)
    context = SessionContext(language=tag)

    pipeline: TransitQueryPipeline = container.resolve(TransitQueryPipeline)
    outcome = pipeline.process_query(sentence, context)

    if speak:
        speech_output: SpeechOutputService = container.resolve(SpeechOutputService)
        speech_output.speak(outcome.response, speech_locale(tag))

    return outcome


def transcribe_audio_file(
    audio_path: Union[str, Path],
    language: Optional[str] = None,
    *,
    container: Optional[Container] = None,
) -> TranscriptionResult:
    """Transcribe a recorded question with the speech capture adapter.

    Raises:
        SpeechCaptureError: If the file cannot be transcribed.
    """
    container = container or get_container()
    tag = _language_tag(language, container)
    capture: SpeechCapturePort = container.resolve(SpeechCapturePort)
    logger.debug("Transcribing audio file", extra={"path": str(audio_path)})
    return capture.transcribe_file(Path(audio_path), speech_locale(tag))
