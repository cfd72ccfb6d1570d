# -*- coding: utf-8 -*-
from typing import List, Optional, Tuple

import gradio as gr

from voice_transit.config import configure_logging, get_config
from voice_transit.container import get_container
from voice_transit.domain.errors import SpeechCaptureError
from voice_transit.domain.models import TransitResult
from voice_transit.locales import LANGUAGES, capture_error_message, get_language
from voice_transit.pipeline import answer_transit_query, transcribe_audio_file
from voice_transit.services import LocationService

configure_logging()

# ============================ CONFIG ============================
CONFIG = get_config()
DEFAULT_LANGUAGE: str = get_language(CONFIG.default_language).tag

LANG_CHOICES: List[Tuple[str, str]] = [
    (profile.name, tag)
    for tag, profile in LANGUAGES.items()
]
RESULT_HEADERS: List[str] = ["Bus", "From", "To", "Departure", "Duration", "Stops"]


def _results_rows(results: Tuple[TransitResult, ...]) -> List[List[object]]:
    return [
        [r.bus_number, r.from_stop, r.to_stop, r.departure_time, r.duration, r.stops]
        for r in results
    ]


def _location_markdown(language: str) -> str:
    location_service: LocationService = get_container().resolve(LocationService)
    location = location_service.current_location(language)
    if location is None:
        return "📍 Location unavailable"
    return f"📍 {location.address}"


def answer_text(
    text: str, language: str, speak: bool
) -> Tuple[str, str, List[List[object]]]:
    if not text or not text.strip():
        return "", "❌ Empty question", []

    outcome = answer_transit_query(text.strip(), language, speak=speak)
    parsed = outcome.parsed
    transcript = text.strip()
    if parsed.is_complete:
        transcript += f"\n\n🧭 {parsed.origin} → {parsed.destination}"
    return transcript, outcome.response, _results_rows(outcome.results)


def transcribe_and_answer(
    audio_path: Optional[str], language: str, speak: bool
) -> Tuple[str, str, List[List[object]]]:
    if not audio_path:
        return "", "❌ No audio recorded", []

    try:
        transcription = transcribe_audio_file(audio_path, language)
    except SpeechCaptureError:
        return "", capture_error_message(language), []

    return answer_text(transcription.full_text, language, speak)


# ============================ UI ============================
with gr.Blocks(title="Voice Transit Assistant") as app:
    gr.Markdown(
        """
# 🚌 Voice Transit Assistant
Ask for a bus between two places, e.g. *Majestic to KR Market* or *Majestic se KR Market tak*.
"""
    )

    with gr.Row():
        lang_dd = gr.Dropdown(LANG_CHOICES, value=DEFAULT_LANGUAGE, label="🌍 Language")
        speak_cb = gr.Checkbox(value=False, label="🔊 Speak the answer")

    location_md = gr.Markdown(_location_markdown(DEFAULT_LANGUAGE))

    with gr.Row():
        audio_in = gr.Audio(
            sources=["microphone", "upload"], type="filepath", label="🎙️ Question"
        )
        text_in = gr.Textbox(
            label="📝 Text", lines=2, placeholder="Majestic to KR Market"
        )

    with gr.Row():
        btn_audio = gr.Button("🎙️ Ask by voice")
        btn_text = gr.Button("📝 Ask by text")

    transcript_out = gr.Textbox(label="📝 Transcript", lines=3)
    response_out = gr.Textbox(label="💬 Response", lines=3)
    results_out = gr.Dataframe(headers=RESULT_HEADERS, label="🚌 Bus rides")

    lang_dd.change(_location_markdown, inputs=lang_dd, outputs=location_md)

    btn_audio.click(
        transcribe_and_answer,
        inputs=[audio_in, lang_dd, speak_cb],
        outputs=[transcript_out, response_out, results_out],
    )
    btn_text.click(
        answer_text,
        inputs=[text_in, lang_dd, speak_cb],
        outputs=[transcript_out, response_out, results_out],
    )

app.launch()
