"""Window, keyboard and mouse events, their dispatch, and the top-level handler."""

from __future__ import annotations

import enum
from collections.abc import Callable
from typing import ClassVar, Protocol, TypeVar

from vang.input import Key, Mouse


class EventType(enum.Enum):
    """The concrete kind of an event."""

    NONE = 0
    WINDOW_CLOSE = enum.auto()
    WINDOW_RESIZE = enum.auto()
    WINDOW_FOCUS = enum.auto()
    WINDOW_LOST_FOCUS = enum.auto()
    WINDOW_MOVED = enum.auto()
    KEY_PRESSED = enum.auto()
    KEY_RELEASED = enum.auto()
    KEY_TYPED = enum.auto()
    MOUSE_BUTTON_PRESSED = enum.auto()
    MOUSE_BUTTON_RELEASED = enum.auto()
    MOUSE_MOVED = enum.auto()
    MOUSE_SCROLLED = enum.auto()


class EventCategory(enum.IntFlag):
    """Bit flags grouping event kinds."""

    NONE = 0
    APPLICATION = 1 << 0
    INPUT = 1 << 1
    KEYBOARD = 1 << 2
    MOUSE = 1 << 3
    MOUSE_BUTTON = 1 << 4


def _camel(name: str) -> str:
    return "".join(part.capitalize() for part in name.split("_"))


class Event:
    """Base of all events; ``handled`` is set once a handler consumes it."""

    event_type: ClassVar[EventType] = EventType.NONE
    category_flags: ClassVar[EventCategory] = EventCategory.NONE

    def __init__(self) -> None:
        self.handled = False

    @property
    def name(self) -> str:
        """The event kind's name, such as ``WindowResize``."""
        return _camel(self.event_type.name)

    def is_in_category(self, category: EventCategory) -> bool:
        """True if the event belongs to any of the given categories."""
        return bool(self.category_flags & category)

    def __str__(self) -> str:
        return self.name


class WindowResizeEvent(Event):
    event_type = EventType.WINDOW_RESIZE
    category_flags = EventCategory.APPLICATION

    def __init__(self, width: int, height: int) -> None:
        super().__init__()
        self.width = width
        self.height = height

    def __str__(self) -> str:
        return f"WindowResizeEvent: {self.width}, {self.height}"


class WindowCloseEvent(Event):
    event_type = EventType.WINDOW_CLOSE
    category_flags = EventCategory.APPLICATION


def _coerce_key(code: int) -> Key | int:
    try:
        return Key(code)
    except ValueError:
        return int(code)


class KeyEvent(Event):
    """Base of keyboard events."""

    category_flags = EventCategory.KEYBOARD | EventCategory.INPUT

    def __init__(self, key_code: Key | int) -> None:
        super().__init__()
        self.key_code = _coerce_key(key_code)


class KeyPressedEvent(KeyEvent):
    event_type = EventType.KEY_PRESSED

    def __init__(self, key_code: Key | int, repeat_count: int) -> None:
        super().__init__(key_code)
        self.repeat_count = repeat_count

    def __str__(self) -> str:
        return f"KeyPressedEvent: {int(self.key_code)} ({self.repeat_count} repeats)"


class KeyReleasedEvent(KeyEvent):
    event_type = EventType.KEY_RELEASED

    def __str__(self) -> str:
        return f"KeyReleasedEvent: {int(self.key_code)}"


class KeyTypedEvent(KeyEvent):
    event_type = EventType.KEY_TYPED

    def __str__(self) -> str:
        return f"KeyTypedEvent: {int(self.key_code)}"


class MouseMovedEvent(Event):
    event_type = EventType.MOUSE_MOVED
    category_flags = EventCategory.MOUSE | EventCategory.INPUT

    def __init__(self, x: float, y: float) -> None:
        super().__init__()
        self.x = float(x)
        self.y = float(y)

    def __str__(self) -> str:
        return f"MouseMovedEvent: {self.x:g}, {self.y:g}"


class MouseScrolledEvent(Event):
    event_type = EventType.MOUSE_SCROLLED
    category_flags = EventCategory.MOUSE | EventCategory.INPUT

    def __init__(self, x_offset: float, y_offset: float) -> None:
        super().__init__()
        self.x_offset = float(x_offset)
        self.y_offset = float(y_offset)

    def __str__(self) -> str:
        return f"MouseScrolledEvent: {self.x_offset:g}, {self.y_offset:g}"


class MouseButtonEvent(Event):
    """Base of mouse button events."""

    category_flags = EventCategory.MOUSE | EventCategory.INPUT

    def __init__(self, button: Mouse | int) -> None:
        super().__init__()
        self.button = Mouse(button)


class MouseButtonPressedEvent(MouseButtonEvent):
    event_type = EventType.MOUSE_BUTTON_PRESSED

    def __str__(self) -> str:
        return f"MouseButtonPressedEvent: {int(self.button)}"


class MouseButtonReleasedEvent(MouseButtonEvent):
    event_type = EventType.MOUSE_BUTTON_RELEASED

    def __str__(self) -> str:
        return f"MouseButtonReleasedEvent: {int(self.button)}"


E = TypeVar("E", bound=Event)


class EventDispatcher:
    """Routes one event to a handler written for its kind."""

    def __init__(self, event: Event) -> None:
        self._event = event

    def dispatch(self, event_class: type[E], func: Callable[[E], bool]) -> bool:
        """Call ``func`` if the event is of ``event_class``'s kind; report whether it ran."""
        if self._event.event_type is event_class.event_type:
            self._event.handled = bool(func(self._event))  # type: ignore[arg-type]
            return True
        return False


class _EventSink(Protocol):
    def on_event(self, event: Event) -> None: ...


class EventHandler:
    """Passes every event from the window on to the layer stack."""

    def __init__(self, layer_stack: _EventSink) -> None:
        self._layer_stack = layer_stack

    def on_event(self, event: Event) -> None:
        """Hand the event to the layer stack."""
        self._layer_stack.on_event(event)