"""
Unit Tests for Console Confirmation

Author: StemPrune Project
License: MIT
"""

import pytest
from unittest.mock import Mock

from stemprune.core.prompt import ConsolePrompter, Prompter


class TestPrompterBase:
    """Test suite for the prompter base class."""

    def test_base_class_is_abstract(self):
        """Test that the base class cannot be instantiated on its own."""
        with pytest.raises(TypeError):
            Prompter()

    def test_subclass_without_confirm_is_rejected(self):
        """Test that subclasses must implement confirm."""
        class Incomplete(Prompter):
            pass

        with pytest.raises(TypeError):
            Incomplete()

    def test_console_prompter_is_a_prompter(self):
        """Test that the console implementation satisfies the base class."""
        assert isinstance(ConsolePrompter(input_func=Mock(return_value="")), Prompter)


class TestConsolePrompter:
    """Test suite for the console prompter."""

    @pytest.mark.parametrize("answer", ["y", "Y", "yes", " YES "])
    def test_yes_answers(self, answer):
        """Test accepted spellings of yes."""
        prompter = ConsolePrompter(input_func=Mock(return_value=answer))

        assert prompter.confirm("Delete?") is True

    @pytest.mark.parametrize("answer", ["n", "No", "NO"])
    def test_no_answers(self, answer):
        """Test accepted spellings of no."""
        prompter = ConsolePrompter(input_func=Mock(return_value=answer))

        assert prompter.confirm("Delete?", default=True) is False

    def test_empty_answer_uses_default(self):
        """Test that pressing enter selects the default."""
        prompter = ConsolePrompter(input_func=Mock(return_value=""))

        assert prompter.confirm("Delete?") is False
        assert prompter.confirm("Delete?", default=True) is True

    def test_hint_reflects_default(self):
        """Test that the prompt text shows which answer is the default."""
        input_func = Mock(return_value="")
        prompter = ConsolePrompter(input_func=input_func)

        prompter.confirm("  Move a.jpg?")
        prompter.confirm("  Move a.jpg?", default=True)

        assert input_func.call_args_list[0].args == ("  Move a.jpg? [y/N] ",)
        assert input_func.call_args_list[1].args == ("  Move a.jpg? [Y/n] ",)

    def test_invalid_answer_asks_again(self, capsys):
        """Test that unrecognised answers repeat the question."""
        input_func = Mock(side_effect=["maybe", "y"])
        prompter = ConsolePrompter(input_func=input_func)

        assert prompter.confirm("Delete?") is True
        assert input_func.call_count == 2
        assert "Please answer" in capsys.readouterr().out

    def test_closed_input_raises(self):
        """Test that end of input propagates."""
        prompter = ConsolePrompter(input_func=Mock(side_effect=EOFError))

        with pytest.raises(EOFError):
            prompter.confirm("Delete?")

    def test_uses_builtin_input_by_default(self, monkeypatch):
        """Test that the real console input is used when nothing is injected."""
        monkeypatch.setattr("builtins.input", lambda prompt: "yes")

        assert ConsolePrompter().confirm("Delete?") is True


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
