"""
Proxy 範例：需驗證的內容存取
"""

from abc import ABC, abstractmethod
from typing import Callable, Optional

from ..constants import ProxyStrings


class SecuredContentAccess(ABC):
    @abstractmethod
    def access_content(self) -> str:
        pass


class SecuredContent(SecuredContentAccess):
    """真正的受保護內容"""

    def access_content(self) -> str:
        return ProxyStrings.GRANTED


class ContentProxy(SecuredContentAccess):
    """
    保護代理

    驗證通過才轉交給 SecuredContent，且 SecuredContent 在第一次通過驗證時才建立。
    """

    def __init__(self, authenticator: Optional[Callable[[], bool]] = None):
        """
        Args:
            authenticator: 驗證函式，回傳 True 表示使用者已驗證（預設一律通過）
        """
        self._authenticator = authenticator or (lambda: True)
        self._secured_content: Optional[SecuredContent] = None

    @property
    def is_loaded(self) -> bool:
        """SecuredContent 是否已建立"""
        return self._secured_content is not None

    def access_content(self) -> str:
        if not self._is_authenticated_user():
            return ProxyStrings.DENIED

        if self._secured_content is None:
            self._secured_content = SecuredContent()
        return self._secured_content.access_content()

    def _is_authenticated_user(self) -> bool:
        return bool(self._authenticator())


def demo() -> str:
    proxy = ContentProxy()
    result = proxy.access_content()
    print(result)
    return result


if __name__ == "__main__":
    demo()
