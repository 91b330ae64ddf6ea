"""State: change an object's behaviour when its internal state changes.

Problem:
    A media player reacts to play, pause and stop differently depending on
    whether it is playing, paused or stopped. Writing that as conditionals
    over a status field spreads the same switch across every method, and
    each new state touches all of them.

Solution:
    Each state is its own class implementing the same three operations. The
    player (the context) holds the current state object and delegates to
    it; states decide on transitions by installing the next state on the
    player.

Use cases:
    1. An object behaves differently depending on its current state, the
       number of states is large and the state-specific code changes often.
    2. A class is polluted with conditionals that alter behaviour according
       to the current values of its fields.

Pros:
    1. Single Responsibility Principle: code for each state lives in its own
       class.
    2. Open/Closed Principle: new states do not change existing states or
       the context.
    3. Bulky state machine conditionals disappear from the context.

Cons:
    1. Overkill when a state machine has only a few states or rarely
       changes.
"""
from abc import ABC, abstractmethod


class PlayerState(ABC):
    """State interface; every operation receives the player to transition it."""

    @abstractmethod
    def play(self, player: "MediaPlayer") -> None:
        pass

    @abstractmethod
    def pause(self, player: "MediaPlayer") -> None:
        pass

    @abstractmethod
    def stop(self, player: "MediaPlayer") -> None:
        pass


class PlayingState(PlayerState):
    def play(self, player: "MediaPlayer") -> None:
        print("Already playing.")

    def pause(self, player: "MediaPlayer") -> None:
        print("Pausing playback.")
        player.set_state(PausedState())

    def stop(self, player: "MediaPlayer") -> None:
        print("Stopping playback.")
        player.set_state(StoppedState())


class PausedState(PlayerState):
    def play(self, player: "MediaPlayer") -> None:
        print("Resuming playback.")
        player.set_state(PlayingState())

    def pause(self, player: "MediaPlayer") -> None:
        print("Already paused.")

    def stop(self, player: "MediaPlayer") -> None:
        print("Stopping playback.")
        player.set_state(StoppedState())


class StoppedState(PlayerState):
    def play(self, player: "MediaPlayer") -> None:
        print("Starting playback.")
        player.set_state(PlayingState())

    def pause(self, player: "MediaPlayer") -> None:
        print("Cannot pause. Media is already stopped.")

    def stop(self, player: "MediaPlayer") -> None:
        print("Already stopped.")


class MediaPlayer:
    """Context; starts stopped."""

    def __init__(self) -> None:
        self._state: PlayerState = StoppedState()

    @property
    def state(self) -> PlayerState:
        return self._state

    def set_state(self, state: PlayerState) -> None:
        self._state = state

    def press_play(self) -> None:
        self._state.play(self)

    def press_pause(self) -> None:
        self._state.pause(self)

    def press_stop(self) -> None:
        self._state.stop(self)


def main() -> None:
    """Walk the player through play, pause, resume, stop and a stray pause."""
    player = MediaPlayer()
    player.press_play()
    player.press_pause()
    player.press_play()
    player.press_stop()
    player.press_pause()


if __name__ == "__main__":
    main()
