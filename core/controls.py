"""Slider controls for the live-tunable simulation parameters."""

from dataclasses import dataclass
from typing import Callable, Optional, Tuple


@dataclass
class Slider:
    """
    Horizontal range slider.

    Attributes:
        label: Text shown next to the value
        minimum: Lowest selectable value
        maximum: Highest selectable value
        step: Values snap to multiples of this above ``minimum``
        value: Current value
        rect: (x, y, width, height) of the track in screen pixels
        value_format: ``str.format`` pattern for the displayed value
        on_change: Called with the new value whenever it changes
    """
    label: str
    minimum: float
    maximum: float
    step: float
    value: float
    rect: Tuple[int, int, int, int] = (0, 0, 200, 14)
    value_format: str = "{:.1f}"
    on_change: Optional[Callable[[float], None]] = None
    dragging: bool = False

    @classmethod
    def from_config(cls, settings: dict, value: float, rect, on_change=None):
        """Build a slider from one entry of ``config.SLIDERS``."""
        slider = cls(
            label=settings["label"],
            minimum=float(settings["min"]),
            maximum=float(settings["max"]),
            step=float(settings["step"]),
            value=float(settings["min"]),
            rect=tuple(rect),
            value_format=settings["format"],
            on_change=on_change
        )
        slider.value = slider._snap(value)
        return slider

    @property
    def fraction(self) -> float:
        """Position of the value along the track, 0-1."""
        span = self.maximum - self.minimum
        if span <= 0:
            return 0.0
        return (self.value - self.minimum) / span

    @property
    def text(self) -> str:
        return f"{self.label}: {self.value_format.format(self.value)}"

    def contains(self, pos) -> bool:
        x, y, w, h = self.rect
        return x <= pos[0] <= x + w and y <= pos[1] <= y + h

    def _snap(self, value: float) -> float:
        value = max(self.minimum, min(self.maximum, value))
        if self.step > 0:
            steps = round((value - self.minimum) / self.step)
            value = min(self.maximum, self.minimum + steps * self.step)
            # Trim float noise from repeated step multiples
            value = round(value, 10)
        return value

    def value_at(self, x: float) -> float:
        """Value under screen x, snapped and clamped."""
        track_x, _, track_w, _ = self.rect
        if track_w <= 0:
            return self.minimum
        frac = (x - track_x) / track_w
        return self._snap(self.minimum + frac * (self.maximum - self.minimum))

    def set_value(self, value: float) -> bool:
        """Set the value; returns True and fires ``on_change`` if it changed."""
        value = self._snap(value)
        if value == self.value:
            return False
        self.value = value
        if self.on_change is not None:
            self.on_change(value)
        return True

    def press(self, pos) -> bool:
        """Start dragging if ``pos`` hits the track. Returns True if consumed."""
        if not self.contains(pos):
            return False
        self.dragging = True
        self.set_value(self.value_at(pos[0]))
        return True

    def drag(self, pos) -> bool:
        if not self.dragging:
            return False
        self.set_value(self.value_at(pos[0]))
        return True

    def release(self):
        self.dragging = False
