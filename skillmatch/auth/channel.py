"""Observable for authentication state changes"""
from __future__ import annotations
from typing import Callable, List, Optional

from skillmatch.auth.models import User

Listener = Callable[[Optional[User]], None]


class AuthStateChannel:
    """Synchronous fan-out of the current user to subscribers.

    Listeners are called in subscription order on the publishing thread.
    A listener that raises stops delivery to the ones after it.
    """

    def __init__(self):
        self._listeners: List[Listener] = []

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register ``listener``; the returned callable removes it again"""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            self._listeners = [l for l in self._listeners if l is not listener]

        return unsubscribe

    def publish(self, user: Optional[User]) -> None:
        for listener in list(self._listeners):
            listener(user)

    def __len__(self) -> int:
        return len(self._listeners)
