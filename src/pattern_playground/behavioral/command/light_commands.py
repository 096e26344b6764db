from abc import abstractmethod
from typing import List

from ...constants import CommandStrings
from .base_command import BaseCommand
from .light import Light


class _LightCommand(BaseCommand):
    """燈控命令共用部分：每次執行都記錄執行前的燈狀態，撤銷時依序還原"""

    def __init__(self, light: Light, description: str):
        super().__init__(description)
        self._light = light
        # 同一命令可重複執行，每次執行各自一筆
        self._snapshots: List[bool] = []

    @property
    def light(self) -> Light:
        return self._light

    def execute(self):
        was_on = self._light.is_on
        self._apply()
        # 執行成功才記錄，失敗時例外直接往上拋
        self._snapshots.append(was_on)

    def undo(self):
        if not self._snapshots:
            # 未執行過，退回單純的反向操作
            self._invert()
            return

        was_on = self._snapshots[-1]
        if was_on != self._light.is_on:
            self._restore(was_on)
        self._snapshots.pop()

    def _restore(self, was_on: bool):
        if was_on:
            self._light.on()
        else:
            self._light.off()

    @abstractmethod
    def _apply(self):
        """對燈執行正向操作"""

    @abstractmethod
    def _invert(self):
        """對燈執行反向操作"""


class LightOnCommand(_LightCommand):
    """開燈命令"""

    def __init__(self, light: Light):
        super().__init__(light, CommandStrings.DESC_LIGHT_ON.format(name=light.name))

    def _apply(self):
        self._light.on()

    def _invert(self):
        self._light.off()


class LightOffCommand(_LightCommand):
    """關燈命令"""

    def __init__(self, light: Light):
        super().__init__(light, CommandStrings.DESC_LIGHT_OFF.format(name=light.name))

    def _apply(self):
        self._light.off()

    def _invert(self):
        self._light.on()
