from ablehub.models.user import User
from ablehub.models.accessibility import AccessibilitySettings, FLAG_FIELDS

__all__ = ['User', 'AccessibilitySettings', 'FLAG_FIELDS']
