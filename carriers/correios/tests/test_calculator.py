"""
Unit Tests for the Interactive Calculator

Run with: pytest carriers/correios/tests/test_calculator.py -v
"""

import pytest

from carriers.correios.scripts import calculator


def answer_prompts(monkeypatch, format_choice: str) -> None:
    """Feed the prompts: CEP, weight, length, height, width, format."""
    answers = iter(["78556-100", "", "", "", "", format_choice])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))


class TestFormatPrompt:

    def test_blank_takes_default(self, monkeypatch):
        answer_prompts(monkeypatch, "")
        assert calculator.get_user_input()["formato"] == 1

    def test_number_passed_through(self, monkeypatch):
        answer_prompts(monkeypatch, "3")
        assert calculator.get_user_input()["formato"] == 3

    @pytest.mark.parametrize("choice,expected", [("x", "x"), ("-1", -1), ("7", 7)])
    def test_bad_choice_not_replaced(self, monkeypatch, choice, expected):
        answer_prompts(monkeypatch, choice)
        assert calculator.get_user_input()["formato"] == expected

    @pytest.mark.parametrize("choice", ["x", "-1"])
    def test_bad_choice_rejected(self, monkeypatch, capsys, choice):
        answer_prompts(monkeypatch, choice)
        assert calculator.main() == 1
        assert "formato:" in capsys.readouterr().out

    def test_default_package_quoted(self, monkeypatch, capsys):
        answer_prompts(monkeypatch, "")
        assert calculator.main() == 0
        out = capsys.readouterr().out
        assert "37.00" in out
        assert "22.20" in out
