"""
遙控器按鍵命令介面
一個按鍵對應一組「正向操作 + 反向操作」
"""

from abc import ABC, abstractmethod


class BaseCommand(ABC):
    """
    遙控器按鍵命令

    子類綁定一個裝置（Receiver），execute 對裝置執行動作，
    undo 把裝置還原成該次 execute 之前的樣子。
    裝置失敗（例如 DeviceError）直接往上拋給遙控器的呼叫端。
    """

    def __init__(self, description: str = ""):
        """
        初始化命令

        Args:
            description: 命令描述（用於顯示在撤銷/重做訊息）
        """
        self._description = description

    @property
    def description(self) -> str:
        """取得命令描述"""
        return self._description or self.__class__.__name__

    @abstractmethod
    def execute(self) -> None:
        """執行命令"""

    @abstractmethod
    def undo(self) -> None:
        """撤銷命令（execute 的反向操作）"""

    def redo(self) -> None:
        """重做命令（預設與 execute 相同）"""
        self.execute()

    def __repr__(self):
        return f"<{self.__class__.__name__} {self.description!r}>"
