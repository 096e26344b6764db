"""
Abstract Factory 範例：主題化 UI 元件
同一個工廠產出的按鈕與開關一定屬於同一主題
"""

from abc import ABC, abstractmethod
from typing import Dict, List, Type

from ..constants import ThemeStrings
from ..errors import UnknownThemeError


# ==============================================================================
# 產品
# ==============================================================================


class Button(ABC):
    @abstractmethod
    def draw(self) -> str:
        pass


class Switch(ABC):
    @abstractmethod
    def toggle(self) -> str:
        pass


class LightThemeButton(Button):
    def draw(self) -> str:
        return ThemeStrings.DRAW_BUTTON.format(theme=ThemeStrings.THEME_LIGHT)


class LightThemeSwitch(Switch):
    def toggle(self) -> str:
        return ThemeStrings.TOGGLE_SWITCH.format(theme=ThemeStrings.THEME_LIGHT)


class DarkThemeButton(Button):
    def draw(self) -> str:
        return ThemeStrings.DRAW_BUTTON.format(theme=ThemeStrings.THEME_DARK)


class DarkThemeSwitch(Switch):
    def toggle(self) -> str:
        return ThemeStrings.TOGGLE_SWITCH.format(theme=ThemeStrings.THEME_DARK)


# ==============================================================================
# 工廠
# ==============================================================================


class ThemeFactory(ABC):
    """主題工廠基類"""

    @abstractmethod
    def create_button(self) -> Button:
        pass

    @abstractmethod
    def create_switch(self) -> Switch:
        pass


class LightThemeFactory(ThemeFactory):
    def create_button(self) -> Button:
        return LightThemeButton()

    def create_switch(self) -> Switch:
        return LightThemeSwitch()


class DarkThemeFactory(ThemeFactory):
    def create_button(self) -> Button:
        return DarkThemeButton()

    def create_switch(self) -> Switch:
        return DarkThemeSwitch()


_FACTORIES: Dict[str, Type[ThemeFactory]] = {
    ThemeStrings.THEME_LIGHT: LightThemeFactory,
    ThemeStrings.THEME_DARK: DarkThemeFactory,
}


def get_theme_factory(name: str) -> ThemeFactory:
    """
    依主題名稱取得工廠

    Args:
        name: 主題名稱（"light" 或 "dark"，不分大小寫）

    Raises:
        UnknownThemeError: 找不到對應主題
    """
    factory_cls = _FACTORIES.get(name.strip().lower())
    if factory_cls is None:
        raise UnknownThemeError(name, ThemeStrings.UNKNOWN_THEME.format(name=name))
    return factory_cls()


def render_controls(factory: ThemeFactory) -> List[str]:
    """客戶端程式碼：只依賴 ThemeFactory 介面"""
    button = factory.create_button()
    switch = factory.create_switch()

    lines = [button.draw(), switch.toggle()]
    for line in lines:
        print(line)
    return lines


def demo() -> List[str]:
    lines = render_controls(get_theme_factory(ThemeStrings.THEME_LIGHT))
    lines += render_controls(get_theme_factory(ThemeStrings.THEME_DARK))
    return lines


if __name__ == "__main__":
    demo()
