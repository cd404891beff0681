import io

import pytest

from trenchsolver.menu import Menu, Puzzle, default_puzzle, goal_state, main


def scripted(*lines):
    feed = iter(lines)

    def read():
        try:
            return next(feed)
        except StopIteration:
            raise EOFError from None

    return read


def make_menu(*lines):
    out = io.StringIO()
    return Menu(scripted(*lines), out), out


def test_default_puzzle_two_soldiers():
    puzzle = default_puzzle(1)
    assert puzzle == Puzzle(3, 2, 2, (-1, 0, -1, 0, 2, 1))


def test_default_puzzle_nine_soldiers_cells():
    puzzle = default_puzzle(5)
    assert puzzle.cells == (
        -1, -1, -1, 0, -1, 0, -1, 0, -1, -1, 0, 2, 3, 4, 5, 6, 7, 8, 9, 1,
    )
    assert (puzzle.size, puzzle.soldiers, puzzle.blanks) == (10, 9, 4)


@pytest.mark.parametrize("choice", [1, 2, 3, 4, 5])
def test_default_puzzles_are_consistent(choice):
    puzzle = default_puzzle(choice)
    assert len(puzzle.cells) == 2 * puzzle.size
    soldiers = sorted(v for v in puzzle.cells if v > 0)
    assert soldiers == list(range(1, puzzle.soldiers + 1))
    assert puzzle.cells.count(0) == puzzle.blanks


@pytest.mark.parametrize("choice", [0, 6, -1])
def test_default_puzzle_rejects_unknown_choice(choice):
    with pytest.raises(ValueError):
        default_puzzle(choice)


def test_goal_state_small_puzzle():
    assert goal_state([-1, 0, -1, 0, 2, 1], 3, 2) == [-1, 0, -1, 1, 2, 0]


@pytest.mark.parametrize("choice", [1, 2, 3, 4, 5])
def test_goal_state_orders_soldiers(choice):
    puzzle = default_puzzle(choice)
    goal = goal_state(puzzle.cells, puzzle.size, puzzle.soldiers)
    top, bottom = goal[: puzzle.size], goal[puzzle.size :]
    assert [v < 0 for v in top] == [v < 0 for v in puzzle.cells[: puzzle.size]]
    assert all(v in (-1, 0) for v in top)
    assert bottom[: puzzle.soldiers] == list(range(1, puzzle.soldiers + 1))
    assert all(v == 0 for v in bottom[puzzle.soldiers :])


def test_goal_state_leaves_input_unchanged():
    cells = [-1, 0, -1, 0, 2, 1]
    goal_state(cells, 3, 2)
    assert cells == [-1, 0, -1, 0, 2, 1]


def test_prompt_default_choice_loads_puzzle():
    menu, _ = make_menu("1", "2")
    menu.prompt_puzzle_type()
    expected = default_puzzle(2)
    assert menu.initial == list(expected.cells)
    assert (menu.size, menu.soldiers, menu.blanks) == (5, 3, 3)


def test_prompt_default_invalid_choice_reports_error():
    menu, out = make_menu("1 9")
    menu.prompt_puzzle_type()
    assert "Error: invalid input" in out.getvalue()
    assert menu.initial == []


def test_invalid_puzzle_type_reports_error():
    menu, out = make_menu("7")
    menu.prompt_puzzle_type()
    assert "Error: invalid input" in out.getvalue()
    assert menu.puzzle_type == 7


def test_custom_puzzle_is_read():
    menu, _ = make_menu("2", "3 2", "5 0 5", "0 2 1")
    menu.prompt_puzzle_type()
    assert menu.initial == [-1, 0, -1, 0, 2, 1]
    assert menu.blanks == 2
    assert (menu.size, menu.soldiers) == (3, 2)


def test_puzzle_size_defaults_when_invalid():
    menu, _ = make_menu("0 0")
    menu.prompt_puzzle_size()
    assert menu.size == 10
    assert menu.soldiers == 9
    assert len(menu.initial) == 20
    assert len(menu.goal) == 20


def test_too_many_soldiers_is_clamped():
    menu, _ = make_menu("4", "8")
    menu.prompt_puzzle_size()
    assert menu.soldiers == menu.size - 1


def test_non_numeric_algorithm_reads_as_zero():
    menu, _ = make_menu("abc")
    menu.prompt_algorithm()
    assert menu.algorithm == 0


def test_prompt_algorithm_reads_choice():
    menu, _ = make_menu("4")
    menu.prompt_algorithm()
    assert menu.algorithm == 4


def test_develop_puzzle_sets_graph_states():
    menu, out = make_menu("1", "1")
    menu.prompt_puzzle_type()
    menu.develop_puzzle()
    assert menu.graph.initial.tunnel.cells == menu.initial
    assert menu.graph.goal.tunnel.cells == menu.goal
    assert menu.goal == goal_state(menu.initial, menu.size, menu.soldiers)
    assert "Puzzle created: " in out.getvalue()


def test_develop_without_puzzle_fails():
    menu, _ = make_menu("3")
    menu.prompt_puzzle_type()
    with pytest.raises(ValueError):
        menu.develop_puzzle()


def test_begin_algorithm_solves_default(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    menu, out = make_menu("1", "1", "1")
    menu.prompt_puzzle_type()
    menu.develop_puzzle()
    menu.prompt_algorithm()
    result = menu.begin_algorithm()
    assert result.solved
    assert result.goal.tunnel.cells == menu.goal
    assert result.goal.path()[0].tunnel.cells == menu.initial
    assert "Goal!!!" in out.getvalue()
    assert "Puzzle can not be solved" not in out.getvalue()
    assert (tmp_path / "info.txt").read_text().startswith("2 men in a trench")


def test_main_runs_interactive_session(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr("builtins.input", scripted("1", "1", "2"))
    assert main([]) == 0
    captured = capsys.readouterr().out
    assert "Goal!!!" in captured
    assert "A* Misplaced Tile" in captured
    assert (tmp_path / "Timesheet.txt").exists()


def test_main_reports_bad_puzzle(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr("builtins.input", scripted("9"))
    assert main([]) == 1
    assert "Error" in capsys.readouterr().err