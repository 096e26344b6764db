"""
Builder 範例：電腦組裝
"""

from abc import ABC, abstractmethod
from typing import Optional, Tuple

from ..constants import BuilderStrings
from ..errors import BuildError


class Computer:
    """組裝完成的電腦"""

    def __init__(self, hdd: Optional[str] = None, ram: Optional[str] = None):
        self.hdd = hdd
        self.ram = ram

    def describe(self) -> str:
        return BuilderStrings.DESCRIBE.format(
            hdd=self.hdd or BuilderStrings.NONE,
            ram=self.ram or BuilderStrings.NONE,
        )

    def __repr__(self):
        return f"Computer(hdd={self.hdd!r}, ram={self.ram!r})"


class ComputerBuilder(ABC):
    """
    電腦建構器基類

    子類可覆寫 _create_computer 來決定起始配置。
    """

    def __init__(self):
        self._computer = self._create_computer()

    @property
    def computer(self) -> Computer:
        """建構中的電腦"""
        return self._computer

    def _create_computer(self) -> Computer:
        return Computer()

    def reset(self):
        """重新開始建構"""
        self._computer = self._create_computer()

    @abstractmethod
    def set_hdd(self, hdd: str):
        pass

    @abstractmethod
    def set_ram(self, ram: str):
        pass

    def build(self) -> Computer:
        return self._computer


class GamingComputerBuilder(ComputerBuilder):
    def set_hdd(self, hdd: str):
        self._computer.hdd = hdd

    def set_ram(self, ram: str):
        self._computer.ram = ram


class OfficeComputerBuilder(ComputerBuilder):
    def set_hdd(self, hdd: str):
        self._computer.hdd = hdd

    def set_ram(self, ram: str):
        self._computer.ram = ram


class ComputerDirector:
    """依固定步驟驅動建構器"""

    def __init__(self):
        self._builder: Optional[ComputerBuilder] = None

    def construct_computer(self, builder: ComputerBuilder, hdd: str, ram: str):
        """
        使用指定建構器組裝電腦

        Args:
            builder: 建構器
            hdd: 硬碟規格
            ram: 記憶體規格
        """
        self._builder = builder
        builder.reset()
        builder.set_hdd(hdd)
        builder.set_ram(ram)

    def get_computer(self) -> Computer:
        """
        取得最近一次組裝的電腦

        Raises:
            BuildError: 尚未呼叫 construct_computer
        """
        if self._builder is None:
            raise BuildError(BuilderStrings.NOTHING_CONSTRUCTED)
        return self._builder.build()


def demo() -> Tuple[Computer, Computer]:
    director = ComputerDirector()

    director.construct_computer(GamingComputerBuilder(), hdd="1TB", ram="16GB")
    gaming_computer = director.get_computer()
    print(gaming_computer.describe())  # Computer with 1TB HDD and 16GB RAM

    director.construct_computer(OfficeComputerBuilder(), hdd="500GB", ram="8GB")
    office_computer = director.get_computer()
    print(office_computer.describe())  # Computer with 500GB HDD and 8GB RAM

    return gaming_computer, office_computer


if __name__ == "__main__":
    demo()
