"""
遙控器（Invoker）
管理撤銷/重做堆疊
"""

import threading
from dataclasses import dataclass
from typing import List, Optional, Tuple

from PySide6.QtCore import QObject, Signal

from ...constants import DEFAULT_MAX_HISTORY, PREFIX_INFO, CommandStrings
from .base_command import BaseCommand


@dataclass(frozen=True)
class UndoResult:
    """
    撤銷/重做結果

    command 為 None 表示堆疊為空（沒有可撤銷的命令），
    這是正常流程而非錯誤，因此不以例外表示。
    """

    command: Optional[BaseCommand] = None

    @property
    def is_empty(self) -> bool:
        """堆疊是否為空"""
        return self.command is None

    def __bool__(self):
        return self.command is not None


class RemoteControl(QObject):
    """
    遙控器

    執行命令並保存歷史，提供撤銷/重做，並發送狀態變更信號。
    執行+入堆疊、出堆疊+撤銷 各自在同一把鎖內完成，
    確保撤銷一定作用在最近一次尚未撤銷的命令上。
    """

    # 信號
    history_changed = Signal()  # 歷史紀錄變更
    can_undo_changed = Signal(bool)  # 可撤銷狀態變更
    can_redo_changed = Signal(bool)  # 可重做狀態變更

    def __init__(
        self,
        max_history: Optional[int] = DEFAULT_MAX_HISTORY,
        parent: Optional[QObject] = None,
    ):
        """
        初始化遙控器

        Args:
            max_history: 最大歷史紀錄數量（None 表示不限制）
            parent: 父物件
        """
        super().__init__(parent)
        if max_history is not None and max_history < 1:
            raise ValueError("max_history must be a positive integer or None")
        self._max_history = max_history
        self._undo_stack: List[BaseCommand] = []
        self._redo_stack: List[BaseCommand] = []
        self._lock = threading.RLock()
        # 上次發送的可撤銷/可重做狀態
        self._last_can_undo = False
        self._last_can_redo = False

    @property
    def max_history(self) -> Optional[int]:
        """最大歷史紀錄數量"""
        return self._max_history

    @property
    def can_undo(self) -> bool:
        """是否可撤銷"""
        return len(self._undo_stack) > 0

    @property
    def can_redo(self) -> bool:
        """是否可重做"""
        return len(self._redo_stack) > 0

    @property
    def history(self) -> Tuple[BaseCommand, ...]:
        """已執行且尚未撤銷的命令（由舊到新）"""
        with self._lock:
            return tuple(self._undo_stack)

    def set_command(self, command: BaseCommand):
        """
        執行命令並加入歷史

        execute 拋出的例外會直接傳給呼叫端，且命令不會加入歷史。

        Args:
            command: 要執行的命令
        """
        with self._lock:
            command.execute()
            self._undo_stack.append(command)
            self._redo_stack.clear()  # 執行新命令時清空重做堆疊

            # 限制歷史紀錄數量
            if self._max_history is not None:
                while len(self._undo_stack) > self._max_history:
                    self._undo_stack.pop(0)

        self._emit_changes()

    def press_undo_button(self) -> UndoResult:
        """
        撤銷上一個命令

        Returns:
            UndoResult，堆疊為空時 is_empty 為 True
        """
        with self._lock:
            if not self.can_undo:
                print(f"{PREFIX_INFO} {CommandStrings.NOTHING_TO_UNDO}")
                return UndoResult()

            command = self._undo_stack.pop()
            try:
                command.undo()
            except Exception:
                # 撤銷失敗，放回堆疊
                self._undo_stack.append(command)
                raise
            self._redo_stack.append(command)

        print(f"{PREFIX_INFO} {CommandStrings.UNDO.format(description=command.description)}")
        self._emit_changes()
        return UndoResult(command)

    def press_redo_button(self) -> UndoResult:
        """
        重做下一個命令

        Returns:
            UndoResult，重做堆疊為空時 is_empty 為 True
        """
        with self._lock:
            if not self.can_redo:
                print(f"{PREFIX_INFO} {CommandStrings.NOTHING_TO_REDO}")
                return UndoResult()

            command = self._redo_stack.pop()
            try:
                command.redo()
            except Exception:
                # 重做失敗，放回堆疊
                self._redo_stack.append(command)
                raise
            self._undo_stack.append(command)

        print(f"{PREFIX_INFO} {CommandStrings.REDO.format(description=command.description)}")
        self._emit_changes()
        return UndoResult(command)

    def clear(self):
        """清空歷史紀錄"""
        with self._lock:
            self._undo_stack.clear()
            self._redo_stack.clear()
        self._emit_changes()

    def get_undo_description(self) -> str:
        """取得撤銷命令的描述"""
        with self._lock:
            if self.can_undo:
                return self._undo_stack[-1].description
            return ""

    def get_redo_description(self) -> str:
        """取得重做命令的描述"""
        with self._lock:
            if self.can_redo:
                return self._redo_stack[-1].description
            return ""

    def _emit_changes(self):
        """發送狀態變更信號（can_undo/can_redo 只在值改變時發送）"""
        self.history_changed.emit()

        with self._lock:
            can_undo = self.can_undo
            if can_undo != self._last_can_undo:
                self._last_can_undo = can_undo
                self.can_undo_changed.emit(can_undo)

            can_redo = self.can_redo
            if can_redo != self._last_can_redo:
                self._last_can_redo = can_redo
                self.can_redo_changed.emit(can_redo)
