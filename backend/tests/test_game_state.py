"""
Tests for domain/game_state.py - the read-only snapshot.
"""

import json
import sys
import os

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from domain import GameState, Point, PowerUp, Enemy, UP


def make_state(**overrides):
    fields = dict(
        mode="survival",
        state="running",
        snake=(Point(2, 2), Point(2, 3), Point(2, 4)),
        direction=UP,
        food=Point(0, 0),
        power_ups=(PowerUp(id="p1", position=Point(4, 0), type="magnet", life=10, max_life=600),),
        enemies=(Enemy(body=(Point(4, 3), Point(4, 4), Point(4, 5)), direction=UP, color="#FF00FF"),),
        score=20,
        speed=98,
        game_time=1234.5,
        active_effects=("SHIELD",),
        width=5,
        height=5,
    )
    fields.update(overrides)
    return GameState(**fields)


class TestGameState:
    """Tests for the GameState snapshot."""

    def test_print_board_layout(self):
        """Board rows start at y=0, enemy cells off the grid are skipped."""
        board = make_state().print_board()
        assert board.splitlines() == [
            " 0 * . . . M",
            " 1 . . . . .",
            " 2 . . @ . .",
            " 3 . . o . X",
            " 4 . . o . X",
            "   0 1 2 3 4",
        ]

    def test_print_board_without_food(self):
        board = make_state(food=None, power_ups=(), enemies=()).print_board()
        assert "*" not in board
        assert "@" in board

    def test_helpers(self):
        state = make_state()
        assert state.head == Point(2, 2)
        assert state.shield_active
        assert state.in_bounds(Point(4, 4))
        assert not state.in_bounds(Point(5, 0))
        assert state.enemy_cells() == {Point(4, 3), Point(4, 4), Point(4, 5)}

    def test_to_dict_is_json_serializable(self):
        """to_dict() only holds plain JSON types."""
        data = make_state().to_dict()
        decoded = json.loads(json.dumps(data))
        assert decoded["snake"] == [[2, 2], [2, 3], [2, 4]]
        assert decoded["food"] == [0, 0]
        assert decoded["power_ups"][0]["type"] == "magnet"
        assert decoded["power_ups"][0]["color"] == "#9D00FF"
        assert decoded["enemies"] == [[[4, 3], [4, 4], [4, 5]]]
        assert decoded["active_effects"] == ["SHIELD"]
        assert decoded["score"] == 20

    def test_to_dict_without_food(self):
        assert make_state(food=None).to_dict()["food"] is None

    def test_repr(self):
        assert "score=20" in repr(make_state())
