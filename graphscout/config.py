"""Centralized configuration for GraphScout.

This module contains the rendering constants, colors, and interaction
defaults shared by the chart widgets.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class RenderingConfig:
    """Configuration for chart rendering."""
    BORDER: int = 20                    # Space above and below the plot area
    HORIZONTAL_LABEL_WIDTH: int = 100   # Pixel slot per x-axis label
    VERTICAL_LABEL_HEIGHT: int = 80     # Pixel slot per y-axis label
    LABEL_BASELINE_OFFSET: int = 4      # Distance of label baselines from the edges

    # Series stroke
    SERIES_STROKE_WIDTH: int = 3
    BAR_SPACING: int = 1

    # Vertical labels column
    VERTICAL_LABELS_WIDTH: int = 60

    # Font settings
    FONT_FAMILY: str = "Sans Serif"
    FONT_SIZE: int = 9
    TITLE_FONT_SIZE: int = 10

    # Canvas settings
    MIN_CANVAS_WIDTH: int = 200
    MIN_CANVAS_HEIGHT: int = 120


@dataclass(frozen=True)
class ColorScheme:
    """Color scheme for the chart."""
    BACKGROUND: str = "#1e1e1e"
    GRID: str = "#444444"       # Dark gray grid lines
    TEXT: str = "#ffffff"
    SERIES: str = "#0077cc"


@dataclass(frozen=True)
class UIConfig:
    """Interaction defaults."""
    ZOOM_WHEEL_FACTOR: float = 1.1      # Scale factor per mouse wheel notch
    WHEEL_PAN_PIXELS: float = 40.0      # Screen-space pan per mouse wheel notch
    WHEEL_NOTCH_DELTA: int = 120        # angleDelta units per wheel notch
    DEFAULT_SCROLLABLE: bool = False
    DEFAULT_SCALABLE: bool = False


# Global instances for easy access
RENDERING = RenderingConfig()
COLORS = ColorScheme()
UI = UIConfig()
