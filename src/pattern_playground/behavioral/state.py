"""
State 範例：網路連線
使用 State Pattern 設計，連線行為依目前狀態而定
"""

from abc import ABC, abstractmethod
from typing import List, Optional, Tuple

from ..constants import StateStrings


class ConnectionState(ABC):
    """
    連線狀態基類

    每個狀態決定 connect/disconnect 的行為，並負責切換 context 的狀態。
    """

    @property
    def name(self) -> str:
        """狀態名稱"""
        return self.__class__.__name__

    @abstractmethod
    def connect(self, context: "NetworkConnectionContext"):
        pass

    @abstractmethod
    def disconnect(self, context: "NetworkConnectionContext"):
        pass


class DisconnectedState(ConnectionState):
    """已斷線"""

    def connect(self, context):
        print(StateStrings.STARTING)
        context.state = ConnectingState()
        # 交給 ConnectingState 完成連線
        context.connect()

    def disconnect(self, context):
        print(StateStrings.ALREADY_DISCONNECTED)


class ConnectingState(ConnectionState):
    """連線中"""

    def connect(self, context):
        print(StateStrings.CONNECTED)
        context.state = ConnectedState()

    def disconnect(self, context):
        print(StateStrings.CANCELLING)
        context.state = DisconnectedState()
        print(StateStrings.DISCONNECTED)


class ConnectedState(ConnectionState):
    """已連線"""

    def connect(self, context):
        print(StateStrings.ALREADY_CONNECTED)

    def disconnect(self, context):
        print(StateStrings.DISCONNECTING)
        context.state = DisconnectedState()
        print(StateStrings.DISCONNECTED)


class NetworkConnectionContext:
    """
    網路連線

    狀態切換紀錄保存在 transitions 中。
    """

    def __init__(self, state: Optional[ConnectionState] = None):
        self._state: ConnectionState = state or DisconnectedState()
        self._transitions: List[str] = []

    @property
    def state(self) -> ConnectionState:
        """目前狀態"""
        return self._state

    @state.setter
    def state(self, state: ConnectionState):
        self._state = state
        self._transitions.append(state.name)

    @property
    def transitions(self) -> Tuple[str, ...]:
        """依序切換過的狀態名稱"""
        return tuple(self._transitions)

    @property
    def is_connected(self) -> bool:
        return isinstance(self._state, ConnectedState)

    def connect(self):
        self._state.connect(self)

    def disconnect(self):
        self._state.disconnect(self)


def demo() -> NetworkConnectionContext:
    connection = NetworkConnectionContext()
    connection.connect()  # Starting connection... -> Connected.
    connection.disconnect()  # Disconnecting... -> Disconnected.
    return connection


if __name__ == "__main__":
    demo()
