from __future__ import annotations

from typing import Callable

from minestake.events.bus import EVENT_CELL_CLICK, EVENT_MOUSE_PRESS, EventBus
from minestake.ui.layout import BoardGeometry

LEFT_BUTTON = 1


class BoardInputSystem:
    """Turns left clicks on the board into cell_click events."""

    def __init__(self, event_bus: EventBus, geometry_provider: Callable[[], BoardGeometry | None]):
        self.event_bus = event_bus
        self._geometry_provider = geometry_provider
        self.enabled = True
        self.event_bus.subscribe(EVENT_MOUSE_PRESS, self.on_mouse_press)

    def on_mouse_press(self, sender, **kwargs):
        x = kwargs.get('x')
        y = kwargs.get('y')
        button = kwargs.get('button')
        if x is None or y is None or button != LEFT_BUTTON:
            return
        if not self.enabled:
            return
        geometry = self._geometry_provider()
        if geometry is None:
            return
        hit = geometry.cell_at_point(float(x), float(y))
        if hit is None:
            return
        row, col = hit
        self.event_bus.emit(EVENT_CELL_CLICK, row=row, col=col)
