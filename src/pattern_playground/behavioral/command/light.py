"""
Receiver：智慧燈
"""

from typing import Optional

from PySide6.QtCore import QObject, Signal

from ...constants import CommandStrings
from ...errors import DeviceError


class Light(QObject):
    """
    智慧燈（命令的接收者）

    只負責開/關狀態，不保存任何歷史。
    重複開燈或關燈不會改變狀態，也不會發送 state_changed。

    Signals:
        state_changed: (is_on) 實際狀態改變時發送
    """

    state_changed = Signal(bool)

    def __init__(
        self,
        name: str = "Light",
        reachable: bool = True,
        parent: Optional[QObject] = None,
    ):
        """
        初始化智慧燈

        Args:
            name: 裝置名稱
            reachable: 裝置是否可連線（False 時 on/off 會拋出 DeviceError）
            parent: 父物件
        """
        super().__init__(parent)
        self._name = name
        self._reachable = reachable
        self._is_on = False

    @property
    def name(self) -> str:
        """裝置名稱"""
        return self._name

    @property
    def is_on(self) -> bool:
        """是否開啟"""
        return self._is_on

    @property
    def reachable(self) -> bool:
        """是否可連線"""
        return self._reachable

    def set_reachable(self, reachable: bool):
        """設定裝置是否可連線（模擬斷線）"""
        self._reachable = reachable

    def on(self):
        """開燈"""
        self._set_state(True)

    def off(self):
        """關燈"""
        self._set_state(False)

    def _set_state(self, is_on: bool):
        if not self._reachable:
            raise DeviceError(
                self._name, CommandStrings.LIGHT_UNREACHABLE.format(name=self._name)
            )

        if self._is_on == is_on:
            print(
                CommandStrings.LIGHT_ALREADY_ON
                if is_on
                else CommandStrings.LIGHT_ALREADY_OFF
            )
            return

        self._is_on = is_on
        print(CommandStrings.LIGHT_ON if is_on else CommandStrings.LIGHT_OFF)
        self.state_changed.emit(is_on)
