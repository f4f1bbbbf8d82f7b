from ablehub.schemas.accessibility import AccessibilityFlagsPayload, describe_errors, json_type_name

__all__ = ['AccessibilityFlagsPayload', 'describe_errors', 'json_type_name']
