import pytest

from pattern_catalog.behavioral.state import MediaPlayer, PausedState, PlayingState, StoppedState, main


def test_main_output(capsys):
    main()

    assert capsys.readouterr().out.splitlines() == [
        "Starting playback.",
        "Pausing playback.",
        "Resuming playback.",
        "Stopping playback.",
        "Cannot pause. Media is already stopped.",
    ]


def test_player_starts_stopped():
    assert isinstance(MediaPlayer().state, StoppedState)


@pytest.mark.parametrize(
    "start, action, message, end",
    [
        (StoppedState, "press_play", "Starting playback.", PlayingState),
        (StoppedState, "press_pause", "Cannot pause. Media is already stopped.", StoppedState),
        (StoppedState, "press_stop", "Already stopped.", StoppedState),
        (PlayingState, "press_play", "Already playing.", PlayingState),
        (PlayingState, "press_pause", "Pausing playback.", PausedState),
        (PlayingState, "press_stop", "Stopping playback.", StoppedState),
        (PausedState, "press_play", "Resuming playback.", PlayingState),
        (PausedState, "press_pause", "Already paused.", PausedState),
        (PausedState, "press_stop", "Stopping playback.", StoppedState),
    ],
)
def test_transitions(capsys, start, action, message, end):
    player = MediaPlayer()
    player.set_state(start())

    getattr(player, action)()

    assert capsys.readouterr().out.splitlines() == [message]
    assert isinstance(player.state, end)
