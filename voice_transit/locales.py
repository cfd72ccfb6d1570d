"""Per-language speech locales and fallback messages.

Six languages are supported. Any unknown tag resolves to English so
every lookup returns a usable, non-empty string.

Example
-------
    >>> speech_locale("kn")
    'kn-IN'
    >>> no_route_message("xx") == no_route_message("en")
    True
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional

from .domain.models import TransitResult


@dataclass(frozen=True, slots=True)
class LanguageProfile:
    """Everything language-specific the pipeline needs.

    Attributes:
        tag: Short language tag ('hi')
        name: English name of the language, used in model prompts
        speech_locale: Locale for speech capture and synthesis ('hi-IN')
        no_route: Shown when no bus route was found
        missing_locations: Shown when origin or destination is missing
        generic_error: Shown when the pipeline fails unexpectedly
        capture_error: Shown when speech capture fails
        route_template: Fallback sentence for the first bus ride
    """

    tag: str
    name: str
    speech_locale: str
    no_route: str
    missing_locations: str
    generic_error: str
    capture_error: str
    route_template: str


DEFAULT_LANGUAGE = "en"

LANGUAGES: Dict[str, LanguageProfile] = {
    "en": LanguageProfile(
        tag="en",
        name="English",
        speech_locale="en-IN",
        no_route="Sorry, no bus routes found.",
        missing_locations="Please mention both starting location and destination.",
        generic_error="Sorry, something went wrong. Please try again.",
        capture_error="Voice recognition failed. Please try again or check your microphone.",
        route_template=(
            "Bus number {bus_number} leaves {from_stop} at {departure_time}. "
            "It will take {duration} to reach {to_stop} with {stops} stops."
        ),
    ),
    "hi": LanguageProfile(
        tag="hi",
        name="Hindi",
        speech_locale="hi-IN",
        no_route="माफ करें, कोई बस मार्ग नहीं मिला।",
        missing_locations="कृपया शुरुआती स्थान और गंतव्य दोनों बताएं।",
        generic_error="माफ करें, कुछ गलत हुआ है। कृपया दोबारा कोशिश करें।",
        capture_error="आवाज़ पहचान नहीं हो पाई। कृपया दोबारा कोशिश करें या माइक्रोफ़ोन जांचें।",
        route_template=(
            "बस नंबर {bus_number} {departure_time} पर {from_stop} से छूटेगी। "
            "{to_stop} तक पहुंचने में {duration} लगेंगे। इस रूट में कुल {stops} स्टॉप हैं।"
        ),
    ),
    "kn": LanguageProfile(
        tag="kn",
        name="Kannada",
        speech_locale="kn-IN",
        no_route="ಕ್ಷಮಿಸಿ, ಯಾವುದೇ ಬಸ್ ಮಾರ್ಗ ಸಿಗಲಿಲ್ಲ.",
        missing_locations="ದಯವಿಟ್ಟು ಆರಂಭದ ಸ್ಥಳ ಮತ್ತು ಗಮ್ಯಸ್ಥಾನ ಎರಡನ್ನೂ ತಿಳಿಸಿ.",
        generic_error="ಕ್ಷಮಿಸಿ, ಏನೋ ತಪ್ಪಾಗಿದೆ. ದಯವಿಟ್ಟು ಮತ್ತೆ ಪ್ರಯತ್ನಿಸಿ.",
        capture_error="ಧ್ವನಿ ಗುರುತಿಸಲು ಆಗಲಿಲ್ಲ. ದಯವಿಟ್ಟು ಮತ್ತೆ ಪ್ರಯತ್ನಿಸಿ ಅಥವಾ ಮೈಕ್ರೊಫೋನ್ ಪರಿಶೀಲಿಸಿ.",
        route_template=(
            "ಬಸ್ ಸಂಖ್ಯೆ {bus_number} {departure_time}ಕ್ಕೆ {from_stop} ಇಂದ ಹೊರಡುತ್ತದೆ. "
            "{to_stop} ತಲುಪಲು {duration} ಬೇಕಾಗುತ್ತದೆ, ಒಟ್ಟು {stops} ನಿಲ್ದಾಣಗಳು."
        ),
    ),
    "ta": LanguageProfile(
        tag="ta",
        name="Tamil",
        speech_locale="ta-IN",
        no_route="மன்னிக்கவும், பேருந்து வழி எதுவும் கிடைக்கவில்லை.",
        missing_locations="தயவுசெய்து புறப்படும் இடம் மற்றும் சேருமிடம் இரண்டையும் கூறவும்.",
        generic_error="மன்னிக்கவும், ஏதோ தவறு நடந்தது. மீண்டும் முயற்சிக்கவும்.",
        capture_error="குரல் அடையாளம் காண முடியவில்லை. மீண்டும் முயற்சிக்கவும் அல்லது மைக்ரோஃபோனைச் சரிபார்க்கவும்.",
        route_template=(
            "பேருந்து எண் {bus_number} {departure_time} மணிக்கு {from_stop} இருந்து புறப்படும். "
            "{to_stop} சென்றடைய {duration} ஆகும், மொத்தம் {stops} நிறுத்தங்கள்."
        ),
    ),
    "te": LanguageProfile(
        tag="te",
        name="Telugu",
        speech_locale="te-IN",
        no_route="క్షమించండి, బస్సు మార్గం ఏదీ దొరకలేదు.",
        missing_locations="దయచేసి బయలుదేరే ప్రదేశం మరియు గమ్యస్థానం రెండూ చెప్పండి.",
        generic_error="క్షమించండి, ఏదో తప్పు జరిగింది. దయచేసి మళ్లీ ప్రయత్నించండి.",
        capture_error="స్వరాన్ని గుర్తించలేకపోయాం. దయచేసి మళ్లీ ప్రయత్నించండి లేదా మైక్రోఫోన్‌ను తనిఖీ చేయండి.",
        route_template=(
            "బస్సు నంబర్ {bus_number} {departure_time}కి {from_stop} నుండి బయలుదేరుతుంది. "
            "{to_stop} చేరుకోవడానికి {duration} పడుతుంది, మొత్తం {stops} స్టాప్‌లు."
        ),
    ),
    "mr": LanguageProfile(
        tag="mr",
        name="Marathi",
        speech_locale="mr-IN",
        no_route="माफ करा, कोणताही बस मार्ग सापडला नाही.",
        missing_locations="कृपया सुरुवातीचे ठिकाण आणि गंतव्य दोन्ही सांगा.",
        generic_error="माफ करा, काहीतरी चूक झाली. कृपया पुन्हा प्रयत्न करा.",
        capture_error="आवाज ओळखता आला नाही. कृपया पुन्हा प्रयत्न करा किंवा मायक्रोफोन तपासा.",
        route_template=(
            "बस क्रमांक {bus_number} {departure_time} वाजता {from_stop} पासून सुटेल. "
            "{to_stop} पर्यंत पोहोचायला {duration} लागतील, एकूण {stops} थांबे."
        ),
    ),
}


def get_language(tag: Optional[str]) -> LanguageProfile:
    """Return the profile for a language tag, falling back to English.

    Region-qualified tags such as 'hi-IN' resolve by their primary
    subtag.
    """
    if tag:
        primary = tag.strip().lower().replace("_", "-").split("-", 1)[0]
        profile = LANGUAGES.get(primary)
        if profile is not None:
            return profile
    return LANGUAGES[DEFAULT_LANGUAGE]


def speech_locale(tag: Optional[str]) -> str:
    """Locale used to configure speech capture and synthesis."""
    return get_language(tag).speech_locale


def no_route_message(tag: Optional[str]) -> str:
    return get_language(tag).no_route


def missing_locations_message(tag: Optional[str]) -> str:
    return get_language(tag).missing_locations


def generic_error_message(tag: Optional[str]) -> str:
    return get_language(tag).generic_error


def capture_error_message(tag: Optional[str]) -> str:
    return get_language(tag).capture_error


def format_route_message(result: TransitResult, tag: Optional[str]) -> str:
    """Render the fixed fallback sentence for one bus ride.

    The result fields are interpolated verbatim.
    """
    return get_language(tag).route_template.format(
        bus_number=result.bus_number,
        from_stop=result.from_stop,
        to_stop=result.to_stop,
        departure_time=result.departure_time,
        duration=result.duration,
        stops=result.stops,
    )
