"""AlphaQuest - drawing-coverage and shape-recognition engine.

AlphaQuest scores a child's freehand drawing against a letter. A letter is
described by a resolution-independent outline (for the fill level) and a
single-stroke guide path (for the trace and free-draw levels). The engine
fits the letter to a canvas, collects the child's strokes and reports what
percentage of the letter the ink covers.

Example:
    $ alphaquest evaluate A strokes.json --level fill

This scales letter A to a 400x300 canvas, runs the fill-coverage check
against the strokes in strokes.json and reports pass or fail.
"""

__version__ = "0.1.0"
__author__ = "AlphaQuest developers"

__all__ = ["__author__", "__version__"]
