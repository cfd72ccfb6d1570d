"""Services layer - Application orchestration.

Available services:
- StructuredGenerationService: Language model calls with per-task fallback
- QueryInterpreter: Transcript to origin and destination
- RouteResolver: Origin and destination to bus rides
- ResponseComposer: Bus rides to a localized sentence
- SpeechOutputService: Ordered synthesizer fallback
- LocationService: Device address in the active language
- TransitQueryPipeline / VoiceTransitAssistant: Session orchestration
"""

from .assistant import TransitQueryPipeline, VoiceTransitAssistant
from .location_service import LocationService
from .query_interpreter import ParseQueryTask, QueryInterpreter, parse_query_json
from .response_composer import ComposeResponseTask, ResponseComposer
from .route_resolver import RouteResolver, extract_bus_steps
from .speech_output import SpeechOutputService
from .structured_generation import GenerationTask, StructuredGenerationService

__all__ = [
    "ComposeResponseTask",
    "GenerationTask",
    "LocationService",
    "ParseQueryTask",
    "QueryInterpreter",
    "ResponseComposer",
    "RouteResolver",
    "SpeechOutputService",
    "StructuredGenerationService",
    "TransitQueryPipeline",
    "VoiceTransitAssistant",
    "extract_bus_steps",
    "parse_query_json",
]
