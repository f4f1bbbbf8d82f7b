import pytest
from ablehub.client.flags import AccessibilityFlags
from ablehub.client.voice import InteractiveElement, VoiceNavigator, match_command, normalize_transcript


def _elements(*labels):
    clicked = []
    elements = [InteractiveElement(label, activate=lambda label=label: clicked.append(label)) for label in labels]
    return elements, clicked


@pytest.mark.parametrize(
    "raw, expected",
    [("Jobs.", "jobs"), ("  Open Courses! ", "open courses"), ("what's new?", "whats new"), ("", "")],
)
def test_normalize_transcript(raw, expected) -> None:
    assert normalize_transcript(raw) == expected


def test_first_containing_label_wins() -> None:
    elements, _ = _elements("Home", "Browse Jobs", "Saved Jobs")
    assert match_command("jobs", elements).label == "Browse Jobs"


def test_no_match_and_empty_phrase() -> None:
    elements, _ = _elements("Home", "Courses")
    assert match_command("settings", elements) is None
    assert match_command("...", elements) is None


class _StubState:
    def __init__(self, flags):
        self.flags = flags
        self.listeners = []

    def subscribe(self, listener):
        self.listeners.append(listener)
        return lambda: self.listeners.remove(listener)


def test_navigator_activates_match_only_when_enabled() -> None:
    elements, clicked = _elements("Courses", "Assistant")
    state = _StubState(AccessibilityFlags())
    navigator = VoiceNavigator(lambda: elements).bind(state)

    assert navigator.handle("assistant") is None
    assert clicked == []

    for listener in state.listeners:
        listener(AccessibilityFlags(voiceNavigation=True))
    assert navigator.is_listening is True

    assert navigator.handle("Assistant.").label == "Assistant"
    assert clicked == ["Assistant"]

    navigator.close()
    assert state.listeners == []


def test_elements_without_labels_are_skipped() -> None:
    clicked = []
    elements = [
        InteractiveElement(None, activate=lambda: clicked.append("icon")),
        InteractiveElement("", activate=lambda: clicked.append("blank")),
        InteractiveElement("Open Courses", activate=lambda: clicked.append("courses")),
    ]
    assert match_command("courses", elements).label == "Open Courses"
    assert match_command("open", elements[:2]) is None


def test_phrase_at_label_start_matches_in_document_order() -> None:
    elements, _ = _elements("My Applications", "Apply Now")
    assert match_command("app", elements).label == "My Applications"
