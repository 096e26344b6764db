"""
Decorator 範例：通知訊息
"""

from abc import ABC, abstractmethod
from typing import List

from ..constants import DecoratorStrings


class Notification(ABC):
    @property
    @abstractmethod
    def description(self) -> str:
        pass


class BasicNotification(Notification):
    @property
    def description(self) -> str:
        return DecoratorStrings.BASIC


class NotificationDecorator(Notification):
    """
    通知裝飾器基類

    預設直接轉交被包裝的通知，子類覆寫 description 加上自己的內容。
    """

    def __init__(self, notification: Notification):
        self._wrapped = notification

    @property
    def wrapped(self) -> Notification:
        return self._wrapped

    @property
    def description(self) -> str:
        return self._wrapped.description


class UrgentNotificationDecorator(NotificationDecorator):
    @property
    def description(self) -> str:
        return DecoratorStrings.URGENT.format(description=super().description)


class IconNotificationDecorator(NotificationDecorator):
    @property
    def description(self) -> str:
        return DecoratorStrings.ICON.format(description=super().description)


def demo() -> List[str]:
    basic = BasicNotification()
    urgent = UrgentNotificationDecorator(basic)
    icon = IconNotificationDecorator(urgent)

    lines = [n.description for n in (basic, urgent, icon)]
    for line in lines:
        print(line)
    return lines


if __name__ == "__main__":
    demo()
