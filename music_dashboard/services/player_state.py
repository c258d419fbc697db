# music_dashboard/services/player_state.py
import logging
from typing import Callable, List
from music_dashboard.models.player_models import PlayerState

logger = logging.getLogger(__name__)

Subscriber = Callable[[PlayerState], None]


class PlayerStateStore:
    """
    Single "now playing" slot shared by independent consumers
    (background player embed, insights view).

    set() replaces the whole triple, there is no merge. Subscribers are
    called synchronously, in subscription order, after every write.
    """

    def __init__(self, initial: PlayerState = None):
        self._state = initial or PlayerState.empty()
        self._subscribers: List[Subscriber] = []

    def get(self) -> PlayerState:
        return self._state

    def set(self, state: PlayerState) -> PlayerState:
        self._state = PlayerState(
            trackUri=state.trackUri,
            trackName=state.trackName,
            artistName=state.artistName,
        )
        logger.info(f"Player state changed: {self._state}")

        for callback in list(self._subscribers):
            callback(self._state)
        return self._state

    def clear(self) -> PlayerState:
        return self.set(PlayerState.empty())

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        self._subscribers.append(callback)

        def unsubscribe():
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe
