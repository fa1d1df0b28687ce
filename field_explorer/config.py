"""
Configuration & Defaults
========================
Central registry for the numeric defaults of the engine and the widget
defaults of the Streamlit page.

Exports:
    DEFAULT_STEP (float): finite-difference step h.
    DEFAULT_POINT_COUNT (int): samples along a trajectory.
    LOG_LEVEL (str): level name read from FIELD_EXPLORER_LOG_LEVEL.
"""
import os

# Engine
# Fixed step, not scale-invariant: accuracy drops for very large or very small ranges.
DEFAULT_STEP: float = 0.001
DEFAULT_POINT_COUNT: int = 100
MIN_RESOLUTION: int = 2
MIN_POINT_COUNT: int = 2

# Plot scaling
PROBE_ARROW_SCALE: float = 0.15
QUIVER_ARROW_SCALE: float = 0.8
CONE_TARGET_COUNT: int = 15
QUIVER_THINNING_RESOLUTION: int = 20

# UI widgets
RESOLUTION_MIN: int = 5
RESOLUTION_MAX: int = 80
RESOLUTION_DEFAULT: int = 30

DEFAULT_F: str = "sin(x)*cos(y)"
DEFAULT_XT: str = "2*cos(t)"
DEFAULT_YT: str = "2*sin(t)"

DEFAULT_X_RANGE = (-3.0, 3.0)
DEFAULT_Y_RANGE = (-3.0, 3.0)
DEFAULT_T_RANGE = (0.0, 6.283185307179586)
DEFAULT_PROBE = (1.0, 1.0)

LOG_LEVEL: str = os.environ.get("FIELD_EXPLORER_LOG_LEVEL", "INFO").upper()
