"""
Memento 範例：文字編輯器的撤銷
"""

from typing import List, Optional

from PySide6.QtCore import QObject, Signal

from ..constants import DEFAULT_MAX_HISTORY, MementoStrings


class TextMemento:
    """編輯器內容快照（建立後不可變）"""

    __slots__ = ("_state",)

    def __init__(self, state: str):
        self._state = state

    @property
    def state(self) -> str:
        return self._state


class TextEditor:
    """文字編輯器（Originator）"""

    def __init__(self):
        self._content = ""

    @property
    def content(self) -> str:
        return self._content

    def append(self, text: str):
        self._content += text

    def save(self) -> TextMemento:
        """建立目前內容的快照"""
        return TextMemento(self._content)

    def restore(self, memento: TextMemento):
        """還原到快照內容"""
        self._content = memento.state


class Caretaker(QObject):
    """
    快照管理者

    只保存快照，不讀取快照內容。

    Signals:
        history_changed: (count) 快照數量變更時發送
    """

    history_changed = Signal(int)

    def __init__(
        self,
        editor: TextEditor,
        max_history: Optional[int] = DEFAULT_MAX_HISTORY,
        parent: Optional[QObject] = None,
    ):
        """
        初始化快照管理者

        Args:
            editor: 要管理的編輯器
            max_history: 最大快照數量（None 表示不限制）
            parent: 父物件
        """
        super().__init__(parent)
        if max_history is not None and max_history < 1:
            raise ValueError("max_history must be a positive integer or None")
        self._editor = editor
        self._max_history = max_history
        self._mementos: List[TextMemento] = []

    @property
    def can_undo(self) -> bool:
        """是否有快照可還原"""
        return len(self._mementos) > 0

    def backup(self):
        """保存編輯器目前狀態"""
        print(MementoStrings.SAVING)
        self._mementos.append(self._editor.save())

        if self._max_history is not None:
            while len(self._mementos) > self._max_history:
                self._mementos.pop(0)

        self.history_changed.emit(len(self._mementos))

    def undo(self) -> bool:
        """
        還原到最近一次保存的狀態

        Returns:
            是否有快照被還原
        """
        if not self.can_undo:
            print(MementoStrings.NOTHING_TO_RESTORE)
            return False

        memento = self._mementos.pop()
        print(MementoStrings.RESTORING)
        self._editor.restore(memento)
        self.history_changed.emit(len(self._mementos))
        return True


def demo() -> TextEditor:
    editor = TextEditor()
    caretaker = Caretaker(editor)

    editor.append("First Line\n")
    caretaker.backup()

    editor.append("Second Line\n")
    caretaker.backup()

    editor.append("Third Line\n")
    print(MementoStrings.CURRENT_CONTENT.format(content=editor.content))

    caretaker.undo()  # 撤銷最後一次修改
    print(MementoStrings.AFTER_UNDO.format(content=editor.content))
    return editor


if __name__ == "__main__":
    demo()
