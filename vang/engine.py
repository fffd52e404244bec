"""The engine: window, graphics, world, player and the per-frame loop tying them together."""

from __future__ import annotations

import time
from collections import deque
from collections.abc import Callable

from vang import timing
from vang.blueprints import BlueprintContainer
from vang.camera import Camera
from vang.entities import EntityManager
from vang.events import Event, EventHandler, WindowCloseEvent, WindowResizeEvent
from vang.input import InputCache, Key, Mouse
from vang.items import BlockBlueprint, ItemBlueprint
from vang.layers import LayerStack
from vang.lights import LightManager
from vang.mods import ModManager
from vang.player import Player
from vang.world import World

DEFAULT_WIDTH = 1920
DEFAULT_HEIGHT = 1080
DEFAULT_FULLSCREEN = False

# Short pause at the end of each frame so an idle loop does not spin a core.
FRAME_SLEEP = 0.0001


class Window:
    """A window without a display: events are queued and delivered on ``update``."""

    def __init__(self) -> None:
        self.title = ""
        self.width = 0
        self.height = 0
        self.fullscreen = False
        self.vsync = False
        self.should_close = False
        self.closed = False
        self._event_callback: Callable[[Event], None] | None = None
        self._pending: deque[Event] = deque()

    def initialize(
        self,
        title: str,
        width: int,
        height: int,
        fullscreen: bool = False,
        event_callback: Callable[[Event], None] | None = None,
    ) -> None:
        """Open the window with a title, size and the function that receives its events."""
        self.title = title
        self.width = width
        self.height = height
        self.fullscreen = fullscreen
        self._event_callback = event_callback
        self.should_close = False
        self.closed = False

    def post_event(self, event: Event) -> None:
        """Queue an event for delivery on the next update; ignored once closed."""
        if not self.closed:
            self._pending.append(event)

    def resize(self, width: int, height: int) -> None:
        """Change the size and report it as a resize event."""
        self.width = width
        self.height = height
        self.post_event(WindowResizeEvent(width, height))

    def request_close(self) -> None:
        """Ask for the window to close, as a user clicking its close button would."""
        self.should_close = True
        self.post_event(WindowCloseEvent())

    def update(self) -> None:
        """Deliver the queued events to the event callback."""
        while self._pending:
            event = self._pending.popleft()
            if self._event_callback is not None:
                self._event_callback(event)

    def close(self) -> None:
        """Close the window and drop undelivered events."""
        self.closed = True
        self._pending.clear()


class GraphicsAPI:
    """A renderer that records what it is asked to show instead of drawing it."""

    def __init__(self) -> None:
        self.application_name = ""
        self.viewport: tuple[int, int] = (0, 0)
        self.frames = 0
        self.camera_position: tuple[float, float, float] | None = None
        self.camera_forward: tuple[float, float, float] | None = None
        self.camera_fov: float | None = None

    def initialize(self, application_name: str = "") -> None:
        """Prepare for drawing on behalf of the named application."""
        self.application_name = application_name

    def update(self) -> None:
        """Draw one frame."""
        self.frames += 1

    def window_resize(self, width: int, height: int) -> None:
        """Match the drawing area to the window size."""
        self.viewport = (width, height)

    def display_camera(self, camera: Camera) -> None:
        """Take the camera's position, direction and field of view for the next frames."""
        self.camera_position = camera.position
        self.camera_forward = camera.forward
        self.camera_fov = camera.fov


class _HeldInput(InputCache):
    """Input state that starts with nothing pressed and the cursor at the origin."""

    def __init__(self) -> None:
        self.keys: set[Key] = set()
        self.buttons: set[Mouse] = set()
        self.position: tuple[float, float] = (0.0, 0.0)

    def is_key_pressed(self, key: Key) -> bool:
        return key in self.keys

    def is_mouse_button_pressed(self, button: Mouse) -> bool:
        return button in self.buttons

    def mouse_position(self) -> tuple[float, float]:
        return self.position


class Engine:
    """Owns every subsystem and runs them once per frame until closed."""

    def __init__(
        self,
        application_name: str = "",
        window: Window | None = None,
        graphics: GraphicsAPI | None = None,
        input_cache: InputCache | None = None,
    ) -> None:
        self.application_name = application_name
        self.window = window if window is not None else Window()
        self.graphics = graphics if graphics is not None else GraphicsAPI()
        self.input_cache: InputCache = input_cache if input_cache is not None else _HeldInput()
        self.world = World()
        camera = Camera(self.world, on_change=self.graphics.display_camera)
        self.player = Player(self.world, camera)
        self.block_manager: BlueprintContainer[BlockBlueprint] = BlueprintContainer()
        self.item_manager: BlueprintContainer[ItemBlueprint] = BlueprintContainer()
        self.mod_manager = ModManager()
        self.layer_stack = LayerStack()
        self.event_handler = EventHandler(self.layer_stack)
        self.entity_manager = EntityManager()
        self.light_manager = LightManager()
        self._running = True

    @property
    def running(self) -> bool:
        """False once :meth:`close` has been called."""
        return self._running

    def initialize(self) -> None:
        """Open the window, start the graphics and place the player."""
        self.window.initialize(
            self.application_name,
            DEFAULT_WIDTH,
            DEFAULT_HEIGHT,
            DEFAULT_FULLSCREEN,
            event_callback=self.event_handler.on_event,
        )
        self.graphics.initialize(self.application_name)
        self.graphics.window_resize(self.window.width, self.window.height)
        self.player.initialize()

    def update(self) -> None:
        """Run one frame: timing, window events, layers, drawing, and shutdown if asked."""
        timing.update_delta_time()

        self.window.update()
        if self.window.should_close:
            self.close()
        self.layer_stack.update()
        self.graphics.update()

        if not self._running:
            self.window.close()

        time.sleep(FRAME_SLEEP)

    def close(self) -> None:
        """Stop the loop; the window closes at the end of the current frame."""
        self._running = False