"""Simple launcher for the Voice Transit Assistant.

This script asks whether you want the Gradio web app, a voice session
in the terminal, or a single typed question, then runs it.
"""

from __future__ import annotations

import subprocess
import sys
from pathlib import Path

from voice_transit.config import configure_logging
from voice_transit.container import get_container
from voice_transit.domain.errors import SessionBusyError
from voice_transit.domain.models import AssistantState, SessionContext
from voice_transit.locales import LANGUAGES, get_language
from voice_transit.pipeline import answer_transit_query
from voice_transit.services import VoiceTransitAssistant


def _print_state(context: SessionContext) -> None:
    if context.state == AssistantState.LISTENING:
        print("🎙️  Listening...")
    elif context.state == AssistantState.PROCESSING and context.transcript:
        print(f"📝 {context.transcript}")


def _ask_language() -> str:
    tags = ", ".join(LANGUAGES)
    choice = input(f"Language ({tags}) : ").strip().lower()
    return get_language(choice or None).tag


def run_app(project_root: Path) -> None:
    script_path = project_root / "apps" / "app.py"
    if not script_path.exists():
        print(f"Cannot find {script_path}.")
        sys.exit(1)

    venv_python = project_root / ".venv" / "bin" / "python"
    if not venv_python.exists():
        venv_python = project_root / ".venv" / "Scripts" / "python.exe"

    python_exe = str(venv_python) if venv_python.exists() else sys.executable
    cmd = [python_exe, str(script_path)]
    print(f"Starting apps/app.py with: {' '.join(cmd)}")
    subprocess.run(cmd, check=False)


def run_voice_session() -> None:
    assistant: VoiceTransitAssistant = get_container().resolve(VoiceTransitAssistant)
    assistant.on_state_change = _print_state
    assistant.set_language(_ask_language())

    if assistant.context.location is not None:
        print(f"📍 {assistant.context.location.address}")

    while True:
        if input("Press Enter to ask (q to quit) : ").strip().lower() == "q":
            break
        try:
            context = assistant.listen()
        except SessionBusyError as e:
            print(f"⏳ {e}")
            continue
        print(f"💬 {context.response}")


def run_text_query() -> None:
    language = _ask_language()
    sentence = input("Question : ").strip()
    outcome = answer_transit_query(sentence, language)
    print(f"💬 {outcome.response}")
    for result in outcome.results:
        print(
            f"  🚌 {result.bus_number}: {result.from_stop} → {result.to_stop} "
            f"({result.departure_time}, {result.duration}, {result.stops} stops)"
        )


def main() -> None:
    project_root = Path(__file__).resolve().parent
    configure_logging()

    print("=== Voice Transit Assistant launcher ===")
    print("1) Web app     (apps/app.py)")
    print("2) Voice       (microphone in this terminal)")
    print("3) Text        (one typed question)")
    choice = input("Choice (1/2/3) : ").strip().lower()

    if choice in {"1", "web", "app"}:
        run_app(project_root)
    elif choice in {"2", "voice", "v"}:
        run_voice_session()
    elif choice in {"3", "text", "t"}:
        run_text_query()
    else:
        print("Unrecognized choice, starting the web app.")
        run_app(project_root)


if __name__ == "__main__":
    main()
