import logging
import re
from dataclasses import dataclass, field
from typing import Callable

logger = logging.getLogger(__name__)

_PUNCTUATION = re.compile(r'[^\w\s]')


@dataclass
class InteractiveElement:
    label: str
    activate: Callable[[], None] = field(repr=False)
    role: str = 'button'


def normalize_transcript(transcript):
    return _PUNCTUATION.sub('', (transcript or '').strip().lower())


def match_command(transcript, elements):
    """
    Görünen etiketi ifadeyi içeren ilk eleman (belge sırasıyla).
    İfadeyle başlayan etiket onu zaten içerdiğinden ayrıca "starts-with" araması yapılmaz.
    Boş ifade hiçbir şeyle eşleşmez.
    """
    phrase = normalize_transcript(transcript)
    if not phrase:
        return None

    return next((el for el in elements if phrase in (el.label or '').lower()), None)


class VoiceNavigator:
    """Sesli komutları görünür butonlara/linklere yönlendirir. voiceNavigation kapalıyken girdi yok sayılır."""

    def __init__(self, elements_provider, enabled=False):
        self._elements_provider = elements_provider
        self.enabled = enabled
        self._unsubscribe = None

    @property
    def is_listening(self):
        return self.enabled

    def bind(self, state):
        self.enabled = state.flags.voiceNavigation
        self._unsubscribe = state.subscribe(self._on_change)
        return self

    def _on_change(self, flags):
        self.enabled = flags.voiceNavigation

    def handle(self, transcript):
        if not self.enabled:
            return None

        logger.debug("[voice] command: %r normalized: %r", transcript, normalize_transcript(transcript))
        match = match_command(transcript, self._elements_provider())
        if match is None:
            logger.info("[voice] no matching element for %r", transcript)
            return None

        logger.info("[voice] matched element %r", match.label)
        match.activate()
        return match

    def close(self):
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None
