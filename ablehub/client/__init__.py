from ablehub.client.flags import AccessibilityFlags, FLAG_NAMES
from ablehub.client.api_client import SettingsApiClient, SettingsClientError
from ablehub.client.state import AccessibilityState, SyncStatus
from ablehub.client.presentation import DocumentRoot, PresentationBinding, apply_accessibility, target_markers

__all__ = [
    'AccessibilityFlags',
    'FLAG_NAMES',
    'SettingsApiClient',
    'SettingsClientError',
    'AccessibilityState',
    'SyncStatus',
    'DocumentRoot',
    'PresentationBinding',
    'apply_accessibility',
    'target_markers',
]
