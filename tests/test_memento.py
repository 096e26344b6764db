"""
Tests for the text editor memento
"""
import pytest

from pattern_playground.behavioral.memento import Caretaker, TextEditor, TextMemento, demo
from pattern_playground.constants import MementoStrings


class TestTextEditor:

    def test_append_and_content(self):
        editor = TextEditor()
        editor.append("a")
        editor.append("b")
        assert editor.content == "ab"

    def test_save_restore(self):
        editor = TextEditor()
        editor.append("first")
        memento = editor.save()
        editor.append(" second")

        editor.restore(memento)

        assert editor.content == "first"
        assert isinstance(memento, TextMemento)
        assert memento.state == "first"


class TestCaretaker:

    def setup_method(self):
        self.editor = TextEditor()

    def test_undo_restores_last_backup(self, qapp):
        caretaker = Caretaker(self.editor)
        self.editor.append("First Line\n")
        caretaker.backup()
        self.editor.append("Second Line\n")
        caretaker.backup()
        self.editor.append("Third Line\n")

        assert caretaker.undo() is True
        assert self.editor.content == "First Line\nSecond Line\n"
        assert caretaker.undo() is True
        assert self.editor.content == "First Line\n"

    def test_undo_empty(self, qapp, capsys):
        caretaker = Caretaker(self.editor)
        self.editor.append("text")

        assert caretaker.can_undo is False
        assert caretaker.undo() is False
        assert self.editor.content == "text"
        assert MementoStrings.NOTHING_TO_RESTORE in capsys.readouterr().out

    def test_max_history(self, qapp):
        caretaker = Caretaker(self.editor, max_history=1)
        self.editor.append("a")
        caretaker.backup()
        self.editor.append("b")
        caretaker.backup()

        assert caretaker.undo() is True
        assert self.editor.content == "ab"
        assert caretaker.undo() is False

    @pytest.mark.parametrize("value", [0, -1])
    def test_rejects_non_positive(self, value, qapp):
        with pytest.raises(ValueError):
            Caretaker(self.editor, max_history=value)

    def test_history_changed_signal(self, qapp, qtbot):
        caretaker = Caretaker(self.editor)
        with qtbot.waitSignal(caretaker.history_changed, timeout=1000) as blocker:
            caretaker.backup()
        assert blocker.args == [1]


def test_demo(qapp, capsys):
    editor = demo()
    assert editor.content == "First Line\nSecond Line\n"
    out = capsys.readouterr().out
    assert MementoStrings.SAVING in out
    assert MementoStrings.RESTORING in out
