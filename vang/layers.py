"""Layers that receive updates and events, kept in an ordered stack."""

from __future__ import annotations

from collections.abc import Iterator

from vang.events import Event


class Layer:
    """A unit of behaviour plugged into the engine's update and event flow."""

    def __init__(self, name: str = "Layer") -> None:
        self.name = name

    def on_attach(self) -> None:
        """Called when the layer is pushed onto a stack."""

    def on_detach(self) -> None:
        """Called when the layer is popped from a stack."""

    def on_update(self) -> None:
        """Called once per frame."""

    def on_event(self, event: Event) -> None:
        """Called for each event that reaches this layer."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"


class LayerStack:
    """Ordinary layers below overlays; updates run bottom-up, events top-down."""

    def __init__(self) -> None:
        self._layers: list[Layer] = []
        self._insert_index = 0

    def update(self) -> None:
        """Update every layer from the bottom of the stack up."""
        for layer in list(self._layers):
            layer.on_update()

    def on_event(self, event: Event) -> None:
        """Offer the event to layers from the top down until one handles it."""
        for layer in reversed(list(self._layers)):
            layer.on_event(event)
            if event.handled:
                break

    def push_layer(self, layer: Layer) -> None:
        """Add a layer above the other layers but below every overlay."""
        self._layers.insert(self._insert_index, layer)
        self._insert_index += 1
        layer.on_attach()

    def push_overlay(self, overlay: Layer) -> None:
        """Add an overlay on top of the stack."""
        self._layers.append(overlay)
        overlay.on_attach()

    def _index_of(self, layer: Layer) -> int | None:
        return next((i for i, item in enumerate(self._layers) if item is layer), None)

    def pop_layer(self, layer: Layer) -> None:
        """Remove a layer if present."""
        index = self._index_of(layer)
        if index is not None:
            del self._layers[index]
            self._insert_index -= 1
            layer.on_detach()

    def pop_overlay(self, overlay: Layer) -> None:
        """Remove an overlay if present."""
        index = self._index_of(overlay)
        if index is not None:
            del self._layers[index]
            overlay.on_detach()

    def __iter__(self) -> Iterator[Layer]:
        return iter(list(self._layers))

    def __len__(self) -> int:
        return len(self._layers)