"""
例外類別
"""


class PlaygroundError(Exception):
    """所有範例例外的基類"""


class DeviceError(PlaygroundError):
    """
    裝置操作失敗（例如裝置無法連線）

    由 Receiver 拋出，Invoker 不會吞掉此例外。
    """

    def __init__(self, device: str, message: str = ""):
        super().__init__(message or device)
        self.device = device


class BuildError(PlaygroundError):
    """Builder 尚未建構任何產品"""


class UnknownThemeError(PlaygroundError):
    """找不到對應的主題工廠"""

    def __init__(self, name: str, message: str = ""):
        super().__init__(message or name)
        self.name = name
