import pytest

from trenchsolver.graph import Graph

START = [-1, 0, -1, 0, 2, 1]
GOAL = [-1, 0, -1, 1, 2, 0]


def small_graph():
    graph = Graph(3, 2, 2)
    graph.set_initial_state(START)
    graph.set_goal_state(GOAL)
    return graph


def test_default_dimensions():
    graph = Graph()
    assert (graph.size, graph.soldiers, graph.blanks) == (10, 9, 4)
    assert len(graph.initial.tunnel.cells) == 20


def test_states_are_loaded():
    graph = small_graph()
    assert graph.initial.tunnel.cells == START
    assert graph.goal.tunnel.cells == GOAL
    assert graph.initial.tunnel.blanks == [1, 3]
    assert graph.goal.is_goal()
    assert not graph.initial.is_goal()


def test_state_is_copied_not_shared():
    cells = list(START)
    graph = Graph(3, 2, 2)
    graph.set_initial_state(cells)
    cells[0] = 7
    assert graph.initial.tunnel.cells == START


def test_successor_swaps_and_counts_step():
    graph = small_graph()
    root = graph.initial
    succ = graph.successor(0, root, 1, 1)
    expected = root.tunnel.copy()
    expected.swap(0, 1, 1)
    assert succ.tunnel.cells == expected.cells
    assert succ.tunnel.blanks == expected.blanks
    assert succ.prev is root
    assert succ.g_cost == root.g_cost + 1
    assert root.tunnel.cells == START


def test_successor_undoing_parent_move_is_dropped():
    graph = small_graph()
    root = graph.initial
    succ = graph.successor(0, root, 1, 1)
    back = graph.successor(0, succ, 1, 0)
    assert back is None


def test_successor_chain_grows_depth():
    graph = small_graph()
    root = graph.initial
    first = graph.successor(0, root, 1, 1)
    second = graph.successor(1, first, 2, 1)
    assert second.g_cost == 2
    assert second.path() == [root, first, second]
    assert sorted(second.tunnel.cells) == sorted(START)
    assert first.tunnel.cells != second.tunnel.cells