from dataclasses import dataclass, asdict, fields, replace

FLAG_NAMES = ('voiceNavigation', 'screenReader', 'highContrast', 'largeText', 'keyboardNav')


@dataclass(frozen=True)
class AccessibilityFlags:
    """İstemci tarafındaki bayrak seti. Değişmez; her değişiklik yeni nesne üretir."""

    voiceNavigation: bool = False
    screenReader: bool = False
    highContrast: bool = False
    largeText: bool = False
    keyboardNav: bool = False

    @classmethod
    def from_payload(cls, data):
        return cls(**{name: bool(data[name]) for name in FLAG_NAMES})

    def merge(self, partial):
        for name, value in partial.items():
            if name not in FLAG_NAMES:
                raise KeyError(f"Unknown accessibility flag: {name}")
            if not isinstance(value, bool):
                raise TypeError(f"{name} must be a bool, got {type(value).__name__}")
        return replace(self, **partial)

    def to_payload(self):
        return asdict(self)

    def enabled(self):
        return {f.name for f in fields(self) if getattr(self, f.name)}
