"""Facade: a simple front for a complicated subsystem.

Problem:
    Watching a movie on a home theater means turning on the TV, switching its
    input, starting the DVD player, the sound system and the projector, and
    setting the volume. Clients that do all of this themselves are tightly
    coupled to every device and easy to get wrong.

Solution:
    ``HomeTheaterFacade`` offers the one operation clients care about,
    ``watch_movie``, and drives the subsystem objects in the right order.
    The facade exposes less than the subsystem does, which is the point.

Use cases:
    1. A limited but straightforward interface to a complex subsystem is
       needed.
    2. A subsystem should be structured into layers, each with its facade.

Pros:
    1. Client code is isolated from the complexity of the subsystem.

Cons:
    1. A facade can grow into a god object coupled to every class of an app.
"""


class TV:
    def turn_on(self) -> None:
        print("TV is turned on")

    def set_input_channel(self) -> None:
        print("TV channel set to DVD")


class DVDPlayer:
    def turn_on(self) -> None:
        print("DVD Player is turned on")

    def play(self) -> None:
        print("DVD is playing")


class SoundSystem:
    def turn_on(self) -> None:
        print("Sound System is turned on")

    def set_volume(self, level: int) -> None:
        print(f"Sound System volume set to {level}")


class Projector:
    def turn_on(self) -> None:
        print("Projector is turned on")


class HomeTheaterFacade:
    """Single entry point over the home theater devices."""

    def __init__(self, tv: TV, dvd_player: DVDPlayer, sound_system: SoundSystem, projector: Projector):
        self.tv = tv
        self.dvd_player = dvd_player
        self.sound_system = sound_system
        self.projector = projector

    def watch_movie(self, volume: int = 20) -> None:
        print("Getting ready to watch a movie...")
        self.tv.turn_on()
        self.tv.set_input_channel()
        self.dvd_player.turn_on()
        self.sound_system.turn_on()
        self.sound_system.set_volume(volume)
        self.projector.turn_on()
        self.dvd_player.play()
        print("Movie is now playing!")


def main() -> None:
    """Start a movie through the facade."""
    home_theater = HomeTheaterFacade(TV(), DVDPlayer(), SoundSystem(), Projector())
    home_theater.watch_movie()


if __name__ == "__main__":
    main()
