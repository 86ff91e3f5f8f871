"""Prompts for values made of several scalars: pairs, points and areas."""

from configuranator.config.schemas import Point
from configuranator.interfaces.terminal.parsers import SCALAR_PARSERS, ScalarKind, parse_tuple
from configuranator.interfaces.terminal.prompts import Prompter

AFFIRMATIVE = "yes"

FIRST_POINT_QUESTION = "Add a point? (yes/no): "
NEXT_POINT_QUESTION = "Enter another point? (yes/no): "


def prompt_tuple(prompter: Prompter, label: str, kind: ScalarKind) -> tuple:
    """Ask for two comma-separated values of ``kind`` until both parse."""
    parse_one = SCALAR_PARSERS[kind]
    return prompter.ask(label, lambda text: parse_tuple(text, parse_one))


def prompt_point(prompter: Prompter) -> Point:
    x = prompter.prompt_real("Enter the x-coordinate: ")
    y = prompter.prompt_real("Enter the y-coordinate: ")
    return Point(x=x, y=y)


def prompt_area(prompter: Prompter, name: str) -> tuple[Point, ...]:
    """
    Collect the points of one area.

    Before each point the operator is asked whether to add it; any answer
    other than exactly ``yes`` closes the area, so an area may be empty.
    """
    prompter.echo(f"---ENTER {name} AREA---")
    area: list[Point] = []
    while True:
        question = NEXT_POINT_QUESTION if area else FIRST_POINT_QUESTION
        if prompter.read(question) != AFFIRMATIVE:
            break
        area.append(prompt_point(prompter))
    return tuple(area)
