"""Exception hierarchy for AlphaQuest.

Evaluators never raise for degenerate geometry or empty drawings; those
resolve to a 0% score. The exceptions below cover malformed static data,
malformed stroke files, unknown letters and storage failures.
"""


class AlphaQuestError(Exception):
    """Base exception for all AlphaQuest errors."""

    pass


class GeometryError(AlphaQuestError):
    """Errors in geometric data."""

    pass


class PathCommandError(GeometryError):
    """Malformed path command stream."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class StrokeError(AlphaQuestError):
    """Invalid stroke data (bad color, negative width)."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class StrokeFileError(AlphaQuestError):
    """Error reading a stroke session file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to read strokes '{path}': {reason}")


class LetterError(AlphaQuestError):
    """Errors related to per-letter reference data."""

    pass


class LetterNotFoundError(LetterError):
    """Requested letter has no reference data."""

    def __init__(self, letter_id: str) -> None:
        self.letter_id = letter_id
        super().__init__(f"Letter '{letter_id}' not found")


class SettingsError(AlphaQuestError):
    """Errors related to the settings store."""

    pass


class SettingsLoadError(SettingsError):
    """Error decoding a settings file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load settings '{path}': {reason}")


class SettingsSaveError(SettingsError):
    """Error writing a settings file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to save settings '{path}': {reason}")
