"""Level attempt state machine.

A LevelAttempt owns everything one try at one level needs: the fitted
geometry, the stroke session, the live stroke capture and the latest
result. The evaluators stay pure; the attempt decides when to call them.

States:
    DRAWING -> EVALUATING -> PASSED | FAILED
    retry() returns to DRAWING with an empty session.
"""

from alphaquest.config import AlphaQuestSettings, Thresholds, get_default_settings
from alphaquest.core.fill import fill_coverage
from alphaquest.core.recognition import recognize_shape
from alphaquest.core.trace import trace_coverage
from alphaquest.core.transform import ScaledGeometry, scale_geometry
from alphaquest.domain import (
    AttemptState,
    CoverageResult,
    LevelKind,
    LetterData,
    Outline,
    Point,
    Size,
    Stroke,
    StrokeCapture,
    StrokeSession,
    TracePath,
)
from alphaquest.utils import EvaluationLogger


def evaluate_level(
    kind: LevelKind,
    geometry: ScaledGeometry,
    strokes: tuple[Stroke, ...],
    settings: AlphaQuestSettings,
) -> CoverageResult:
    """Run the evaluator that belongs to a level with its configured parameters.

    Args:
        kind: Level to evaluate
        geometry: The level's scaled geometry
        strokes: Finalized strokes
        settings: Application settings holding the per-level parameters

    Returns:
        CoverageResult from the level's evaluator
    """
    geo = settings.geometry
    if kind == LevelKind.FILL:
        return fill_coverage(geometry, strokes, grid_step=settings.fill.grid_step)
    if kind == LevelKind.TRACE:
        cfg = settings.trace
        return trace_coverage(
            geometry,
            strokes,
            grid_step=cfg.grid_step,
            proximity_tolerance=cfg.proximity_tolerance,
            stroke_buffer=cfg.stroke_buffer,
            curve_mode=geo.curve_mode,
            curve_tolerance_factor=cfg.curve_tolerance_factor,
            flatten_tolerance=geo.flatten_tolerance,
        )
    cfg_draw = settings.free_draw
    return recognize_shape(
        geometry,
        strokes,
        sample_count=cfg_draw.sample_count,
        tolerance_multiplier=cfg_draw.tolerance_multiplier,
        stroke_buffer=cfg_draw.stroke_buffer,
        curve_mode=geo.curve_mode,
        flatten_tolerance=geo.flatten_tolerance,
    )


def level_threshold(kind: LevelKind, thresholds: Thresholds) -> float:
    """Pick the pass threshold for a level."""
    if kind == LevelKind.FILL:
        return float(thresholds.fill_threshold_percent)
    if kind == LevelKind.TRACE:
        return float(thresholds.trace_threshold_percent)
    return float(thresholds.shape_recognition_sensitivity)


class LevelAttempt:
    """One attempt at one level for one letter.

    Example:
        attempt = LevelAttempt.for_letter(letter, LevelKind.FILL, Size(400, 300))
        attempt.begin_stroke(Point(120, 80))
        attempt.extend_stroke(Point(200, 90))
        attempt.end_stroke()
        state = attempt.check(store.load_thresholds())
    """

    def __init__(
        self,
        kind: LevelKind,
        source: Outline | TracePath,
        target: Size,
        settings: AlphaQuestSettings | None = None,
        logger: EvaluationLogger | None = None,
    ) -> None:
        self.kind = kind
        self.settings = settings if settings is not None else get_default_settings()
        self.session = StrokeSession()
        self._source = source
        self._logger = logger if logger is not None else EvaluationLogger()
        self._state = AttemptState.DRAWING
        self._result = CoverageResult.empty()
        self._checked_result: CoverageResult | None = None

        level_cfg = self._level_config()
        self.capture = StrokeCapture(
            self.session,
            color=level_cfg.brush_color,
            width=level_cfg.brush_width,
        )
        self._geometry = self._fit(target)
        self._refresh()

    @classmethod
    def for_letter(
        cls,
        letter: LetterData,
        kind: LevelKind,
        target: Size,
        settings: AlphaQuestSettings | None = None,
        logger: EvaluationLogger | None = None,
    ) -> "LevelAttempt":
        """Create an attempt using the letter geometry the level needs.

        The fill level uses the outline; trace and free-draw use the guide.
        """
        source: Outline | TracePath = letter.outline if kind == LevelKind.FILL else letter.trace_path
        return cls(kind, source, target, settings=settings, logger=logger)

    def _level_config(self):
        if self.kind == LevelKind.FILL:
            return self.settings.fill
        if self.kind == LevelKind.TRACE:
            return self.settings.trace
        return self.settings.free_draw

    def _fit(self, target: Size) -> ScaledGeometry:
        geometry = scale_geometry(self._source, target, self._level_config().padding_fraction)
        self._logger.log_geometry_scaled(self.kind, target.width, target.height, geometry.is_empty)
        return geometry

    def _refresh(self) -> None:
        # Free-draw is only scored on check, as the ink is not tied to the guide
        if self.kind == LevelKind.FREE_DRAW:
            return
        self._result = evaluate_level(self.kind, self._geometry, self.session.strokes, self.settings)

    @property
    def state(self) -> AttemptState:
        return self._state

    @property
    def geometry(self) -> ScaledGeometry:
        return self._geometry

    @property
    def live_result(self) -> CoverageResult:
        """Latest coverage, recomputed after every stroke or resize (fill and trace)."""
        return self._result

    @property
    def result(self) -> CoverageResult | None:
        """Result of the last check, None if not checked since the last retry."""
        return self._checked_result

    @property
    def accepts_input(self) -> bool:
        return self._state == AttemptState.DRAWING

    def resize(self, target: Size) -> None:
        """Refit the geometry to a new canvas size and rescore."""
        self._geometry = self._fit(target)
        self._refresh()

    def set_brush(self, color: str | None = None, width: float | None = None) -> None:
        """Select the brush for the next stroke."""
        self.capture.set_brush(color=color, width=width)

    def begin_stroke(self, point: Point) -> None:
        if not self.accepts_input:
            self._logger.log_input_ignored(self.kind, self._state.value)
            return
        self.capture.begin(point)

    def extend_stroke(self, point: Point) -> None:
        if not self.accepts_input:
            self._logger.log_input_ignored(self.kind, self._state.value)
            return
        self.capture.move(point)

    def end_stroke(self) -> Stroke | None:
        """Finalize the live stroke and rescore.

        Returns:
            The finalized stroke, or None if nothing was drawn
        """
        if not self.accepts_input:
            self.capture.cancel()
            self._logger.log_input_ignored(self.kind, self._state.value)
            return None
        stroke = self.capture.end()
        if stroke is not None:
            self._refresh()
        return stroke

    def add_stroke(self, stroke: Stroke) -> bool:
        """Append an already finalized stroke (e.g. replayed from a file)."""
        if not self.accepts_input:
            self._logger.log_input_ignored(self.kind, self._state.value)
            return False
        added = self.session.add(stroke)
        if added:
            self._refresh()
        return added

    def check(self, thresholds: Thresholds) -> AttemptState:
        """Evaluate the drawing and decide pass or fail.

        Args:
            thresholds: Pass thresholds from the settings store

        Returns:
            PASSED or FAILED (a passed attempt stays passed)
        """
        if self._state == AttemptState.PASSED:
            return self._state

        if self.capture.is_live:
            self.capture.end()

        self._state = AttemptState.EVALUATING
        result = evaluate_level(self.kind, self._geometry, self.session.strokes, self.settings)
        self._result = result
        self._checked_result = result

        threshold = level_threshold(self.kind, thresholds)
        passed = result.passes(threshold)
        self._state = AttemptState.PASSED if passed else AttemptState.FAILED
        self._logger.log_check(self.kind, result, threshold, passed)
        return self._state

    def retry(self) -> None:
        """Clear the drawing and return to DRAWING."""
        self.capture.cancel()
        self.session.clear()
        self._state = AttemptState.DRAWING
        self._checked_result = None
        self._result = CoverageResult.empty()
        self._refresh()
        self._logger.log_retry(self.kind)
