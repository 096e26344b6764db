"""
命令模組（撤銷/重做）
"""

from .base_command import BaseCommand
from .light import Light
from .light_commands import LightOffCommand, LightOnCommand
from .remote_control import RemoteControl, UndoResult
from .smart_home import demo

__all__ = [
    "BaseCommand",
    "Light",
    "LightOffCommand",
    "LightOnCommand",
    "RemoteControl",
    "UndoResult",
    "demo",
]
