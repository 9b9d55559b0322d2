"""Registry of pointer-press listeners owned by the application.

Widgets that need to know about presses anywhere on screen (for example
to close a dropdown when the user clicks elsewhere) register a callback
on mount and remove it on unmount.
"""

from typing import Any, Callable


PointerListener = Callable[[Any], None]


class PointerListeners:
    """Fan a pointer press out to every registered listener."""

    def __init__(self) -> None:
        self._listeners: list[PointerListener] = []

    def __len__(self) -> int:
        return len(self._listeners)

    def __contains__(self, listener: object) -> bool:
        return listener in self._listeners

    def add(self, listener: PointerListener) -> Callable[[], None]:
        """Register ``listener`` and return a function that removes it."""
        self._listeners.append(listener)

        def remove() -> None:
            self.discard(listener)

        return remove

    def discard(self, listener: PointerListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def notify(self, target: Any) -> None:
        """Report a press on ``target`` (the widget under the pointer)."""
        # Copy: a listener may unregister itself while handling the press
        for listener in list(self._listeners):
            listener(target)
