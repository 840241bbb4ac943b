"""Scoped subscriptions for events raised outside the browser widget."""

from __future__ import annotations

from collections.abc import Callable

ClickHandler = Callable[[bool], None]


class ClickEvents:
    """Publish global clicks to subscribed handlers.

    ``emit(inside)`` reports whether the click landed inside the browser.
    ``subscribe`` returns the matching unsubscribe callable.
    """

    def __init__(self) -> None:
        self._handlers: list[ClickHandler] = []

    def subscribe(self, handler: ClickHandler) -> Callable[[], None]:
        self._handlers.append(handler)

        def unsubscribe() -> None:
            if handler in self._handlers:
                self._handlers.remove(handler)

        return unsubscribe

    @property
    def subscriber_count(self) -> int:
        return len(self._handlers)

    def emit(self, inside: bool) -> None:
        for handler in list(self._handlers):
            handler(inside)
