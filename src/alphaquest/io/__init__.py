"""I/O layer for AlphaQuest.

This module handles everything that crosses the process boundary or
comes from static data: SVG letter geometry, fontTools pen recordings,
stroke session files and the persisted user settings.

Key responsibilities:
- Parse SVG path data into Outline and TracePath models
- Convert between fontTools pen recordings and domain path commands
- Provide per-letter reference data
- Load and save stroke sessions and user settings

Key classes:
- LetterDataProvider: Reference geometry keyed by letter
- SettingsStore: Threshold and progress contract used by the levels
- JsonSettingsStore: SettingsStore backed by a JSON file
"""

from alphaquest.io.converter import (
    path_to_recording,
    recording_to_commands,
    svg_to_outline,
    svg_to_trace_path,
)
from alphaquest.io.letters import LetterDataProvider
from alphaquest.io.store import JsonSettingsStore, SettingsStore, default_settings_path
from alphaquest.io.strokes import load_stroke_session, save_stroke_session

__all__ = [
    "JsonSettingsStore",
    "LetterDataProvider",
    "SettingsStore",
    "default_settings_path",
    "load_stroke_session",
    "path_to_recording",
    "recording_to_commands",
    "save_stroke_session",
    "svg_to_outline",
    "svg_to_trace_path",
]
