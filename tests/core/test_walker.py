"""Tests for single-token and synchronized walks."""

from __future__ import annotations

import pytest

from tapewalk.core import MissingNodeError, NonTerminatingError, Walker
from tapewalk.parse import parse_puzzle
from tests.conftest import SIMPLE_MAP, SIMULTANEOUS_MAP, make_walker


class TestWalkUntil:
    """Single-token walks."""

    def test_accepting_start_returns_zero_steps(self):
        walker = make_walker({"Z": ("Z", "Z")}, "L")

        assert walker.walk_until("Z", lambda node: node == "Z") == (0, "Z")

    def test_min_steps_forces_a_move_before_accepting(self):
        walker = make_walker({"Z": ("Z", "Z")}, "L")

        assert walker.walk_until("Z", lambda node: node == "Z", min_steps=1) == (1, "Z")

    def test_reaches_target_after_replaying_tape(self):
        walker = make_walker({"A": ("B", "B"), "B": ("A", "Z"), "Z": ("Z", "Z")}, "LLR")

        assert walker.walk_until("A", lambda node: node == "Z") == (6, "Z")
        assert walker.count_steps("A", "Z") == 6

    def test_offset_starts_mid_tape(self):
        walker = make_walker({"A": ("A", "Z"), "Z": ("Z", "Z")}, "LLR")

        # Offset 2 applies R first.
        assert walker.walk_until("A", lambda node: node == "Z", offset=2) == (1, "Z")
        assert walker.walk_until("A", lambda node: node == "Z", offset=0) == (3, "Z")

    def test_cap_raises_non_terminating(self):
        walker = make_walker({"A": ("A", "A"), "Z": ("Z", "Z")}, "LR", max_steps=10)

        with pytest.raises(NonTerminatingError, match="within 10 steps") as exc_info:
            walker.walk_until("A", lambda node: node == "Z")

        assert exc_info.value.max_steps == 10
        assert exc_info.value.positions == ("A",)

    def test_cap_allows_acceptance_on_last_step(self):
        walker = make_walker(
            {"A": ("B", "B"), "B": ("A", "Z"), "Z": ("Z", "Z")}, "LLR", max_steps=6
        )

        assert walker.count_steps("A", "Z") == 6

    def test_unknown_node_reached_during_walk_is_fatal(self):
        with pytest.warns(UserWarning):
            walker = make_walker({"A": ("Q", "Q")}, "L")

        with pytest.raises(MissingNodeError):
            walker.walk_until("A", lambda node: node == "Z")

    def test_negative_cap_rejected(self):
        with pytest.raises(ValueError, match="max_steps"):
            make_walker({"A": ("A", "A")}, "L", max_steps=-1)


class TestWalkUntilAll:
    """Lock-step walks over several tokens."""

    def test_exact_match_waits_for_simultaneous_arrival(self):
        puzzle = parse_puzzle(SIMULTANEOUS_MAP)
        walker = Walker(puzzle.graph, puzzle.tape)

        # 11A first hits 11Z at step 2 and 22A hits 22Z at step 3.
        assert walker.count_simultaneous_steps(["11A", "22A"], ["11Z", "22Z"]) == 6

    def test_all_tokens_on_accepting_nodes(self):
        puzzle = parse_puzzle(SIMULTANEOUS_MAP)
        walker = Walker(puzzle.graph, puzzle.tape)

        result = walker.walk_until_all(
            ["11A", "22A"], lambda nodes: all(node.endswith("Z") for node in nodes)
        )

        assert result == (6, ("11Z", "22Z"))

    def test_single_token_matches_walk_until(self):
        puzzle = parse_puzzle(SIMPLE_MAP)
        walker = Walker(puzzle.graph, puzzle.tape)

        single = walker.count_steps("AAA", "ZZZ")

        assert walker.count_simultaneous_steps(["AAA"], ["ZZZ"]) == single

    def test_tokens_share_tape_index(self):
        walker = make_walker({"A": ("L1", "R1"), "L1": ("L1", "L1"), "R1": ("R1", "R1")}, "RL")

        # Both tokens consume R on step 0.
        assert walker.walk_until_all(["A", "A"], lambda nodes: True, min_steps=1) == (
            1,
            ("R1", "R1"),
        )

    def test_empty_starts_rejected(self):
        walker = make_walker({"A": ("A", "A")}, "L")

        with pytest.raises(ValueError, match="At least one start node"):
            walker.walk_until_all([], lambda nodes: True)

    def test_mismatched_targets_rejected(self):
        walker = make_walker({"A": ("A", "A")}, "L")

        with pytest.raises(ValueError, match="differ in length"):
            walker.count_simultaneous_steps(["A", "A"], ["A"])

    def test_cap_reports_all_positions(self):
        walker = make_walker({"A": ("A", "A"), "B": ("B", "B")}, "L", max_steps=3)

        with pytest.raises(NonTerminatingError) as exc_info:
            walker.walk_until_all(["A", "B"], lambda nodes: False)

        assert exc_info.value.positions == ("A", "B")
