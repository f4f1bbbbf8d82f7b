from pydantic import BaseModel, ConfigDict, Field, StrictBool


class AccessibilityFlagsPayload(BaseModel):
    """PUT /api/accessibility gövdesi: beş bayrağın tamamı zorunlu, hepsi gerçek boolean."""

    model_config = ConfigDict(extra='forbid', populate_by_name=True)

    voice_navigation: StrictBool = Field(alias='voiceNavigation')
    screen_reader: StrictBool = Field(alias='screenReader')
    high_contrast: StrictBool = Field(alias='highContrast')
    large_text: StrictBool = Field(alias='largeText')
    keyboard_nav: StrictBool = Field(alias='keyboardNav')

    def to_columns(self):
        return self.model_dump(by_alias=False)


def json_type_name(value):
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, (list, tuple)):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__


def describe_errors(exc):
    """pydantic hatalarını alan bazlı {path, field, expected, received, message} listesine çevirir."""
    details = []
    for err in exc.errors():
        path = [str(part) for part in err.get("loc", ())]
        kind = err.get("type")
        if kind == "missing":
            expected, received = "boolean", "undefined"
            message = "Required"
        elif kind == "extra_forbidden":
            expected, received = "never", json_type_name(err.get("input"))
            message = f"Unrecognized key: {path[-1] if path else ''}"
        elif kind == "model_type":
            expected, received = "object", json_type_name(err.get("input"))
            message = f"Expected object, received {received}"
        else:
            expected, received = "boolean", json_type_name(err.get("input"))
            message = f"Expected boolean, received {received}"
        details.append({
            "path": path,
            "field": path[-1] if path else "",
            "code": kind,
            "expected": expected,
            "received": received,
            "message": message,
        })
    return details
