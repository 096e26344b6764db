"""
設計模式範例集
每個範例各自獨立，互不共享狀態
"""

from .errors import BuildError, DeviceError, PlaygroundError, UnknownThemeError

__version__ = "0.1.0"

__all__ = ["BuildError", "DeviceError", "PlaygroundError", "UnknownThemeError"]
