from dataclasses import dataclass
from ablehub.client.flags import AccessibilityFlags, FLAG_NAMES

MARKER_VALUE = 'true'

CLASS_MARKERS = {
    'highContrast': ('high-contrast',),
    'largeText': ('large-text',),
    'keyboardNav': ('keyboard-nav',),
}

ATTRIBUTE_MARKERS = {
    'keyboardNav': ('data-keyboard-nav',),
    'screenReader': ('data-screen-reader',),
    'voiceNavigation': ('data-voice-nav',),
}


@dataclass(frozen=True)
class Markers:
    classes: frozenset
    attributes: frozenset


def target_markers(flags):
    """Bayrak setinin tam hedef işaret kümesi. Saf fonksiyon; her bayrak kendi işaretlerini belirler."""
    classes, attributes = set(), set()
    for name in FLAG_NAMES:
        if getattr(flags, name):
            classes.update(CLASS_MARKERS.get(name, ()))
            attributes.update(ATTRIBUTE_MARKERS.get(name, ()))
    return Markers(frozenset(classes), frozenset(attributes))


MANAGED_MARKERS = target_markers(AccessibilityFlags(**{name: True for name in FLAG_NAMES}))


class DocumentRoot:
    """Belge kök elemanının (html) class listesi ve attribute'ları."""

    def __init__(self, classes=(), attributes=None):
        self.classes = set(classes)
        self.attributes = dict(attributes or {})

    def add_class(self, name):
        self.classes.add(name)

    def remove_class(self, name):
        self.classes.discard(name)

    def has_class(self, name):
        return name in self.classes

    def set_attribute(self, name, value):
        self.attributes[name] = value

    def remove_attribute(self, name):
        self.attributes.pop(name, None)

    def get_attribute(self, name):
        return self.attributes.get(name)

    def snapshot(self):
        return frozenset(self.classes), frozenset(self.attributes.items())


def apply_accessibility(root, flags):
    """
    Kök elemanı bayraklarla uzlaştırır: eksik işaretler eklenir, bayat olanlar silinir.

    Sadece yönetilen işaretlere dokunur; aynı bayraklarla tekrar çağırmak
    hiçbir şeyi değiştirmez.
    """
    target = target_markers(flags)

    for name in MANAGED_MARKERS.classes - target.classes:
        root.remove_class(name)
    for name in target.classes:
        root.add_class(name)

    for name in MANAGED_MARKERS.attributes - target.attributes:
        root.remove_attribute(name)
    for name in target.attributes:
        if root.get_attribute(name) != MARKER_VALUE:
            root.set_attribute(name, MARKER_VALUE)

    return target


class PresentationBinding:
    """Bir AccessibilityState'e abone olup her değişiklikte apply_accessibility çalıştırır."""

    def __init__(self, root, state):
        self.root = root
        apply_accessibility(root, state.flags)
        self._unsubscribe = state.subscribe(self._on_change)

    def _on_change(self, flags):
        apply_accessibility(self.root, flags)

    def close(self):
        self._unsubscribe()


class KeyboardDetector:
    """
    Tab tuşuna basılınca geçici klavye odak çerçevelerini açar,
    fare hareketi/tıklamasında kapatır. force_enable açıksa hep açık kalır.
    """

    TAB_KEY = 'Tab'

    def __init__(self, root, force_enable=False):
        self.root = root
        self.force_enable = force_enable
        self.auto_enabled = False
        if force_enable:
            self._enable()

    def _enable(self):
        for name in CLASS_MARKERS['keyboardNav']:
            self.root.add_class(name)
        for name in ATTRIBUTE_MARKERS['keyboardNav']:
            self.root.set_attribute(name, MARKER_VALUE)
        self.auto_enabled = True

    def _disable(self):
        if self.force_enable:
            return
        for name in CLASS_MARKERS['keyboardNav']:
            self.root.remove_class(name)
        for name in ATTRIBUTE_MARKERS['keyboardNav']:
            self.root.remove_attribute(name)
        self.auto_enabled = False

    def on_key_down(self, key):
        if key == self.TAB_KEY:
            self._enable()

    def on_pointer(self):
        if self.auto_enabled and not self.force_enable:
            self._disable()

    def close(self):
        self._disable()
