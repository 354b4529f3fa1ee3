"""Tests for the confirmation providers."""

import pytest

from devapps_installer.core.prompts import AutoConfirmer, ConsoleConfirmer


def scripted(*answers):
    it = iter(answers)

    def fake_input(prompt):
        ans = next(it)
        if isinstance(ans, BaseException):
            raise ans
        return ans

    return fake_input


@pytest.mark.parametrize("answer, expected", [("y", True), ("YES", True), ("n", False), ("", False)])
def test_console_confirm(answer, expected):
    assert ConsoleConfirmer(scripted(answer)).confirm("Continue?") is expected


def test_console_confirm_reasks_on_garbage():
    assert ConsoleConfirmer(scripted("maybe", "y")).confirm("Continue?") is True


def test_closed_stdin_means_no():
    c = ConsoleConfirmer(scripted(EOFError()))
    assert c.confirm("Continue?") is False
    ConsoleConfirmer(scripted(EOFError())).wait("Press Enter")


def test_auto_confirmer_records_questions():
    c = AutoConfirmer(False)
    assert c.confirm("Continue?") is False
    c.wait("Press Enter")
    assert c.asked == ["Continue?", "Press Enter"]
