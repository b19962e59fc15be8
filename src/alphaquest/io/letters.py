"""Static per-letter reference data.

Letter geometry is authored as SVG path data in a 0-100 unit box
(y grows downwards, as on a canvas) and parsed once on first access.
"""

from alphaquest.domain.letter import LetterData
from alphaquest.exceptions import LetterNotFoundError
from alphaquest.io.converter import svg_to_outline, svg_to_trace_path

# Outer contour then the triangular counter
_A_OUTLINE = (
    "M50 10 L10 90 L30 90 L40 70 L60 70 L70 90 L90 90 L50 10 Z "
    "M50 35 L40 60 L60 60 L50 35 Z"
)
_A_TRACE = "M50 14 L20 88 M50 14 L80 88 M32 65 L68 65"

# Outer contour then the two bowl counters
_B_OUTLINE = (
    "M20 10 L55 10 Q80 10 80 30 Q80 45 65 50 Q85 55 85 72 Q85 90 60 90 L20 90 Z "
    "M35 22 L52 22 Q65 22 65 32 Q65 42 52 42 L35 42 Z "
    "M35 56 L56 56 Q70 56 70 67 Q70 78 56 78 L35 78 Z"
)
_B_TRACE = (
    "M27 10 L27 90 "
    "M27 16 Q72 14 72 32 Q72 48 27 49 "
    "M27 49 Q78 50 78 70 Q78 86 27 84"
)

_LETTER_SOURCES: dict[str, tuple[str, str]] = {
    "A": (_A_OUTLINE, _A_TRACE),
    "B": (_B_OUTLINE, _B_TRACE),
}


class LetterDataProvider:
    """Provides reference geometry keyed by letter identifier.

    Lookups are case-insensitive. Unknown letters yield None from get()
    so callers can treat them as "no target".

    Example:
        provider = LetterDataProvider()
        letter = provider.get("a")
        if letter is not None:
            print(len(letter.outline))
    """

    def __init__(self, sources: dict[str, tuple[str, str]] | None = None) -> None:
        """Initialize the provider.

        Args:
            sources: Mapping of letter id to (outline SVG data, trace SVG data);
                defaults to the built-in letters
        """
        raw = sources if sources is not None else _LETTER_SOURCES
        self._sources = {key.upper(): value for key, value in raw.items()}
        self._cache: dict[str, LetterData] = {}

    def available(self) -> list[str]:
        """Return the identifiers of all known letters, sorted."""
        return sorted(self._sources)

    def get(self, letter_id: str) -> LetterData | None:
        """Look up a letter.

        Args:
            letter_id: Letter identifier in any case

        Returns:
            LetterData, or None if the letter is unknown

        Raises:
            PathCommandError: If the stored SVG data is malformed
        """
        key = letter_id.strip().upper()
        if key not in self._sources:
            return None
        if key not in self._cache:
            outline_data, trace_data = self._sources[key]
            self._cache[key] = LetterData(
                letter_id=key,
                outline=svg_to_outline(outline_data),
                trace_path=svg_to_trace_path(trace_data),
            )
        return self._cache[key]

    def require(self, letter_id: str) -> LetterData:
        """Like get(), but raise LetterNotFoundError for unknown letters."""
        letter = self.get(letter_id)
        if letter is None:
            raise LetterNotFoundError(letter_id)
        return letter
