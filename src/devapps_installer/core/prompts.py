from typing import Protocol
from .colors import ORANGE, BOLD, paint

class Confirmer(Protocol):
    def confirm(self, question: str) -> bool: ...
    def wait(self, message: str) -> None: ...

class ConsoleConfirmer:
    """Asks on the terminal. A closed stdin counts as "no"."""

    def __init__(self, input_fn=input):
        self._input = input_fn

    def _ask(self, prompt: str) -> str | None:
        try:
            return self._input(paint(prompt, ORANGE, BOLD))
        except EOFError:
            return None

    def confirm(self, question: str) -> bool:
        while True:
            ans = self._ask(f"{question} [y/N] → ")
            if ans is None:
                return False
            ans = ans.strip().lower()
            if ans in ("y", "yes"):
                return True
            if ans in ("", "n", "no"):
                return False

    def wait(self, message: str) -> None:
        self._ask(f"{message} ")

class AutoConfirmer:
    """Answers every question the same way and never blocks."""

    def __init__(self, answer: bool = True):
        self.answer = answer
        self.asked: list[str] = []

    def confirm(self, question: str) -> bool:
        self.asked.append(question)
        return self.answer

    def wait(self, message: str) -> None:
        self.asked.append(message)
