"""
Command 範例：智慧家庭遙控器
"""

from .light import Light
from .light_commands import LightOffCommand, LightOnCommand
from .remote_control import RemoteControl


def demo() -> RemoteControl:
    """開燈 → 關燈 → 撤銷兩次，燈回到關閉狀態"""
    light = Light()
    light_on = LightOnCommand(light)
    light_off = LightOffCommand(light)

    remote = RemoteControl()
    remote.set_command(light_on)
    remote.set_command(light_off)
    remote.press_undo_button()
    remote.press_undo_button()
    return remote


if __name__ == "__main__":
    demo()
