from unittest import mock

from bataille3d.cli import main, play

FLEET = ["0", "0", "0", "H", "1", "0", "0", "H", "2", "0", "0"]
FLEET_CELLS = [["0", "0", "0"], ["1", "0", "0"], ["1", "1", "0"],
               ["2", "0", "0"], ["2", "1", "0"], ["2", "2", "0"]]
WIDE_MISS = ["4", "5", "2"]


def scripted(answers):
    pending = iter(answers)

    def ask(prompt=""):
        try:
            return next(pending)
        except StopIteration:
            raise EOFError from None

    return ask


def first_player_wins():
    answers = FLEET + FLEET
    for number, shot in enumerate(FLEET_CELLS):
        answers += shot
        if number < len(FLEET_CELLS) - 1:
            answers += WIDE_MISS
    return answers


def second_player_wins():
    answers = FLEET + FLEET
    for shot in FLEET_CELLS:
        answers += WIDE_MISS + shot
    return answers


def run(answers):
    output, pauses, clears = [], [], []
    winner = play(
        scripted(answers),
        output.append,
        lambda: pauses.append(1),
        lambda: clears.append(1),
    )
    return winner, "".join(output), len(pauses), len(clears)


def test_first_player_wins():
    winner, text, pauses, clears = run(first_player_wins())
    assert winner == 1
    assert "Joueur 1 a gagne !" in text
    assert clears == pauses + 1


def test_second_player_wins():
    winner, text, pauses, clears = run(second_player_wins())
    assert winner == 2
    assert "Joueur 2 a gagne !" in text
    assert clears == pauses + 1


def test_shot_results_are_reported():
    _, text, _, _ = run(first_player_wins())
    assert text.count("Toucher !!!!") == len(FLEET_CELLS)
    assert text.count("Oups tu n'as pas touche !!") == len(FLEET_CELLS) - 1


def test_summary_reveals_board():
    _, text, _, _ = run(first_player_wins())
    summary = text.split("recapitulatif")[-1]
    assert "|  C " in summary
    assert "|  A " in summary


def test_bad_targets_are_asked_again():
    answers = FLEET + FLEET + ["abc", "7", "0", "0"] + first_player_wins()[len(FLEET) * 2:]
    winner, text, _, _ = run(answers)
    assert winner == 1
    assert "hors de la grille" in text


def test_main_plays_a_game(capsys):
    answers = FLEET + FLEET
    for number, shot in enumerate(FLEET_CELLS):
        answers += shot + [""]
        if number < len(FLEET_CELLS) - 1:
            answers += WIDE_MISS + [""]
    with mock.patch("builtins.input", scripted(answers)), mock.patch(
        "bataille3d.cli.subprocess.run"
    ) as run_command:
        assert main([]) == 0
    assert "Joueur 1 a gagne !" in capsys.readouterr().out
    assert run_command.call_count == 2 * len(FLEET_CELLS)


def test_main_stops_when_input_ends():
    with mock.patch("builtins.input", scripted(["0"])), mock.patch(
        "bataille3d.cli.subprocess.run"
    ):
        assert main([]) == 1