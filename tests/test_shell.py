"""Tests for the interactive shell."""

import pytest

from src.videoplayer.commands import create_parser
from src.videoplayer.shell import SELECTION_PROMPT, Shell


@pytest.fixture
def run_shell(player, feed):
    """Run a shell over the given input lines and return what it printed."""

    def run(lines):
        output = []
        shell = Shell(create_parser(player), input_func=feed(lines), output=output.append)
        shell.run()
        return output

    return run


def test_banner_and_exit(run_shell):
    output = run_shell(["EXIT"])
    assert output == [
        "Hello and welcome to YouTube, what would you like to do?",
        "Enter HELP for list of available commands or EXIT to terminate.",
        "YouTube has now terminated its execution. Thank you and goodbye!",
    ]


def test_end_of_input_ends_quietly(run_shell):
    output = run_shell([])
    assert len(output) == 2


def test_exit_stops_reading(run_shell, player):
    run_shell(["exit", "PLAY cat1"])
    assert player.slot.is_empty


def test_help(run_shell):
    output = run_shell(["help"])
    assert output[2].startswith("Available commands:")


def test_runs_commands(run_shell):
    output = run_shell(["PLAY cat1", "", "PAUSE", "PAUSE"])
    assert output[2:] == [
        "Playing video: Amazing Cats",
        "Pausing video: Amazing Cats",
        "Video already paused: Amazing Cats",
    ]


def test_command_errors_are_printed(run_shell):
    output = run_shell(["DANCE", "PLAY"])
    assert output[2] == "Please enter a valid command, type HELP for a list of available commands."
    assert output[3] == "Please enter PLAY command with 1 argument."


def test_search_selection_plays_video(run_shell, player):
    output = run_shell(["SEARCH_VIDEOS dogs", "1"])
    assert output[2:] == [
        "Here are the results for dogs:",
        "1) Funny Dogs (dog1) [dog animal]",
        *SELECTION_PROMPT,
        "Playing video: Funny Dogs",
    ]
    assert player.slot.video.video_id == "dog1"


def test_tag_search_selection(run_shell, player):
    output = run_shell(["SEARCH_VIDEOS_WITH_TAG animal", "2"])
    assert output[-1] == "Playing video: Funny Dogs"


@pytest.mark.parametrize("answer", ["no", "0", "3", ""])
def test_search_selection_invalid_answer_is_no(run_shell, player, answer):
    output = run_shell(["SEARCH_VIDEOS_WITH_TAG animal", answer, "SHOW_PLAYING"])
    assert output[-1] == "No video is currently playing"
    assert player.slot.is_empty


def test_search_without_results_does_not_prompt(run_shell, player):
    output = run_shell(["SEARCH_VIDEOS horses", "PLAY dog1"])
    assert output[2:] == ["No search results for horses", "Playing video: Funny Dogs"]


def test_search_selection_end_of_input(run_shell, player):
    output = run_shell(["SEARCH_VIDEOS cats"])
    assert output[-2:] == list(SELECTION_PROMPT)
    assert player.slot.is_empty


def test_custom_player_name(player, feed):
    output = []
    shell = Shell(
        create_parser(player),
        input_func=feed(["EXIT"]),
        output=output.append,
        player_name="TubeBox",
    )
    shell.run()
    assert output[0] == "Hello and welcome to TubeBox, what would you like to do?"
    assert output[-1] == "TubeBox has now terminated its execution. Thank you and goodbye!"
