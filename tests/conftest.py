"""
Shared test fixtures.

Every test gets a fresh in-memory ``TripRegistry`` with the default flat
fare and driver-id offset, plus a scripted console whose prompts are fed
from a list and whose output is captured line by line.
"""

from __future__ import annotations

from typing import Iterable

import pytest

from ridesharing.cli.app import ConsoleApp
from ridesharing.domain.pricing import FixedFarePricing
from ridesharing.services.registry import TripRegistry


class ScriptedConsole:
    """Feeds canned answers to prompts and records everything printed."""

    def __init__(self, answers: Iterable[str]):
        self.answers = list(answers)
        self.prompts: list[str] = []
        self.lines: list[str] = []

    def input(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self.answers:
            raise EOFError
        return self.answers.pop(0)

    def print(self, line: str = "") -> None:
        self.lines.append(line)

    @property
    def text(self) -> str:
        return "\n".join(self.lines)


@pytest.fixture
def registry() -> TripRegistry:
    return TripRegistry(pricing=FixedFarePricing(25.0), driver_id_offset=100)


@pytest.fixture
def run_console(registry):
    """Run the menu loop over *answers*; returns (console, exit_code)."""

    def _run(*answers: str):
        console = ScriptedConsole(answers)
        app = ConsoleApp(registry, input_fn=console.input, output=console.print)
        return console, app.run()

    return _run
