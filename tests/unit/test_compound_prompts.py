"""Tests for configuranator.interfaces.terminal.compound — pairs, points and areas"""

import pytest

from configuranator.config.schemas import Point
from configuranator.core.exceptions import InputExhaustedError
from configuranator.interfaces.terminal.compound import (
    FIRST_POINT_QUESTION,
    NEXT_POINT_QUESTION,
    prompt_area,
    prompt_point,
    prompt_tuple,
)
from configuranator.interfaces.terminal.parsers import ScalarKind
from configuranator.interfaces.terminal.prompts import Prompter, ScriptedInput


def make_prompter(lines):
    source = ScriptedInput(lines)
    return Prompter(source), source


class TestPromptTuple:
    def test_reals(self):
        prompter, _ = make_prompter(["93.0, 81.0"])
        assert prompt_tuple(prompter, "FOV: ", ScalarKind.REAL) == (93.0, 81.0)

    def test_reprompts_on_bad_tuple(self, capsys):
        prompter, source = make_prompter(["1,2,3", "a, 2", "4096, 2160"])
        assert prompt_tuple(prompter, "Resolution: ", ScalarKind.INTEGER) == (4096, 2160)
        assert len(source.prompts) == 3
        err = capsys.readouterr().err
        assert "Error: Invalid tuple: expected two comma-separated values, got '1,2,3'" in err
        assert "Error: Error parsing first value" in err


class TestPromptPoint:
    def test_point(self):
        prompter, source = make_prompter(["1", "2"])
        assert prompt_point(prompter) == Point(x=1.0, y=2.0)
        assert source.prompts == ["Enter the x-coordinate: ", "Enter the y-coordinate: "]

    def test_each_coordinate_retried_independently(self):
        prompter, source = make_prompter(["1", "north", "2"])
        assert prompt_point(prompter) == Point(x=1.0, y=2.0)
        assert source.prompts[1:] == ["Enter the y-coordinate: ", "Enter the y-coordinate: "]


class TestPromptArea:
    def test_immediate_decline_gives_empty_area(self, capsys):
        prompter, source = make_prompter(["no"])
        assert prompt_area(prompter, "WAYPOINTS") == ()
        assert source.prompts == [FIRST_POINT_QUESTION]
        assert "---ENTER WAYPOINTS AREA---" in capsys.readouterr().out

    @pytest.mark.parametrize("n", [1, 2, 5])
    def test_n_points_in_entry_order(self, n):
        lines = []
        for i in range(n):
            lines += ["yes", str(i), str(-i)]
        lines.append("no")
        prompter, _ = make_prompter(lines)
        area = prompt_area(prompter, "MAPPING")
        assert area == tuple(Point(x=float(i), y=float(-i)) for i in range(n))

    def test_second_question_wording(self):
        prompter, source = make_prompter(["yes", "0", "0", "nope"])
        prompt_area(prompter, "TARGET")
        assert source.prompts[-1] == NEXT_POINT_QUESTION

    @pytest.mark.parametrize("answer", ["Yes", "YES", "y", ""])
    def test_only_exact_yes_continues(self, answer):
        prompter, _ = make_prompter(["yes", "3", "4", answer])
        assert prompt_area(prompter, "TARGET") == (Point(x=3.0, y=4.0),)

    def test_answer_is_trimmed(self):
        prompter, _ = make_prompter(["  yes  ", "3", "4", "no"])
        assert len(prompt_area(prompter, "TARGET")) == 1

    def test_script_ends_mid_area(self):
        prompter, _ = make_prompter(["yes", "1"])
        with pytest.raises(InputExhaustedError):
            prompt_area(prompter, "TARGET")
