"""Assistant session - Main orchestrator.

TransitQueryPipeline turns one transcript into a response. The
VoiceTransitAssistant drives a session around it:

    IDLE -> LISTENING -> PROCESSING -> IDLE

Capture failures go straight back to IDLE with a localized error
message. Every transition produces a new SessionContext.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field, replace
from typing import Any, Callable, Optional

from ..domain.errors import DirectionsError, SessionBusyError, SpeechCaptureError
from ..domain.models import (
    AssistantState,
    ParsedQuery,
    PipelineOutcome,
    SessionContext,
    TransitResult,
)
from ..locales import (
    DEFAULT_LANGUAGE,
    capture_error_message,
    generic_error_message,
    get_language,
    missing_locations_message,
    speech_locale,
)
from ..ports.speech import SpeechCapturePort
from .location_service import LocationService
from .query_interpreter import QueryInterpreter
from .response_composer import ResponseComposer
from .route_resolver import RouteResolver
from .speech_output import SpeechOutputService

StateCallback = Callable[[SessionContext], None]


@dataclass
class TransitQueryPipeline:
    """Transcript to response: interpret, resolve, compose.

    Attributes:
        interpreter: Extracts origin and destination
        resolver: Finds bus rides
        composer: Builds the response text
    """

    interpreter: QueryInterpreter
    resolver: RouteResolver
    composer: ResponseComposer

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def process_query(self, query: str, context: SessionContext) -> PipelineOutcome:
        """Answer one transit query.

        Never raises; every failure becomes a localized message.

        Args:
            query: The transcript.
            context: Current session context; only its language is read.

        Returns:
            PipelineOutcome whose context is IDLE with transcript,
            response and results replaced.
        """
        language = context.language
        parsed = ParsedQuery()
        results: tuple[TransitResult, ...] = ()

        self._logger.info(
            "Processing query",
            extra={"query": query[:100], "language": language},
        )

        try:
            parsed = self.interpreter.interpret(query, language)
            if not parsed.is_complete:
                response = missing_locations_message(language)
            else:
                results = tuple(
                    self.resolver.resolve(parsed.origin, parsed.destination)
                )
                response = self.composer.compose(results, language)
        except DirectionsError as e:
            self._logger.warning(
                "Directions failed while processing query",
                extra={"status": e.status, "error": str(e)},
            )
            results = ()
            response = generic_error_message(language)
        except Exception:
            self._logger.exception(
                "Unexpected error processing query", extra={"language": language}
            )
            results = ()
            response = generic_error_message(language)

        new_context = replace(
            context,
            state=AssistantState.IDLE,
            transcript=query,
            response=response,
            results=results,
        )
        return PipelineOutcome(
            response=response,
            results=results,
            parsed=parsed,
            context=new_context,
        )


@dataclass
class VoiceTransitAssistant:
    """Voice session driver.

    Attributes:
        pipeline: Query pipeline
        capture: Speech capture adapter
        speech_output: Optional speech output; responses are only shown
            when absent
        location_service: Optional device location lookup
        language: Initial language tag
        on_state_change: Called with the new context on every transition
    """

    pipeline: TransitQueryPipeline
    capture: SpeechCapturePort
    speech_output: Optional[SpeechOutputService] = None
    location_service: Optional[LocationService] = None
    language: str = DEFAULT_LANGUAGE
    on_state_change: Optional[StateCallback] = None

    last_outcome: Optional[PipelineOutcome] = field(default=None, init=False)
    _context: SessionContext = field(init=False, repr=False)
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)
        tag = get_language(self.language).tag
        self._context = SessionContext(language=tag)
        self._refresh_location(tag)

    @property
    def context(self) -> SessionContext:
        """Current session context."""
        return self._context

    @property
    def state(self) -> AssistantState:
        return self._context.state

    def _set_context(self, context: SessionContext) -> None:
        previous = self._context.state
        self._context = context
        if previous != context.state:
            self._logger.debug(
                "State transition",
                extra={"from": previous.name, "to": context.state.name},
            )
        if self.on_state_change is not None:
            self.on_state_change(context)

    def _transition(self, **changes: Any) -> None:
        self._set_context(replace(self._context, **changes))

    def _refresh_location(self, tag: str) -> None:
        if self.location_service is None:
            return
        location = self.location_service.current_location(tag)
        self._transition(location=location)

    def _require_idle(self) -> None:
        if self._context.state != AssistantState.IDLE:
            raise SessionBusyError(
                "A query is already in progress",
                state=self._context.state.name,
            )

    def _begin(self, state: AssistantState) -> None:
        with self._lock:
            self._require_idle()
            self._transition(state=state, transcript="", response="")

    def set_language(self, tag: str) -> SessionContext:
        """Switch the active language and refresh the device location.

        Args:
            tag: Language tag; unknown tags fall back to English.

        Returns:
            The updated context.

        Raises:
            SessionBusyError: If a capture or query is running.
        """
        resolved = get_language(tag).tag
        with self._lock:
            self._require_idle()
            self._transition(language=resolved)
        self._refresh_location(resolved)
        self._logger.info("Language changed", extra={"language": resolved})
        return self._context

    def listen(self) -> SessionContext:
        """Capture one utterance and answer it.

        Returns:
            The context after the session returns to IDLE.

        Raises:
            SessionBusyError: If a capture or query is already running.
        """
        self._begin(AssistantState.LISTENING)
        language = self._context.language

        try:
            transcription = self.capture.capture(speech_locale(language))
        except SpeechCaptureError as e:
            self._logger.warning(
                "Speech capture failed",
                extra={"locale": e.locale, "error": str(e)},
            )
            self._transition(
                state=AssistantState.IDLE,
                response=capture_error_message(language),
            )
            return self._context
        except Exception:
            self._transition(state=AssistantState.IDLE)
            raise

        return self._process(transcription.full_text)

    def ask(self, text: str) -> SessionContext:
        """Answer a typed or already transcribed query.

        Raises:
            SessionBusyError: If a capture or query is already running.
        """
        self._begin(AssistantState.PROCESSING)
        return self._process(text)

    def _process(self, text: str) -> SessionContext:
        try:
            self._transition(state=AssistantState.PROCESSING, transcript=text)
            outcome = self.pipeline.process_query(text, self._context)
            self.last_outcome = outcome
            # response is visible while it is being spoken
            self._set_context(
                replace(outcome.context, state=AssistantState.PROCESSING)
            )
            if self.speech_output is not None:
                self.speech_output.speak(
                    outcome.response, speech_locale(self._context.language)
                )
        finally:
            self._transition(state=AssistantState.IDLE)
        return self._context
