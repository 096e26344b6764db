import sys
from typing import Callable, Dict, List, Optional

from PySide6.QtCore import QCoreApplication

from .behavioral import memento, state
from .behavioral.command import demo as command_demo
from .constants import DEMO_ORDER, PREFIX_ERROR, AppStrings
from .creational import abstract_factory, builder
from .structural import adapter, decorator, proxy

DEMOS: Dict[str, Callable[[], object]] = {
    "command": command_demo,
    "memento": memento.demo,
    "state": state.demo,
    "abstract_factory": abstract_factory.demo,
    "builder": builder.demo,
    "adapter": adapter.demo,
    "decorator": decorator.demo,
    "proxy": proxy.demo,
}


def run(argv: Optional[List[str]] = None) -> int:
    """
    執行範例

    Args:
        argv: 範例名稱列表（未指定則依 DEMO_ORDER 全部執行）

    Returns:
        結束代碼
    """
    names = list(argv) if argv else list(DEMO_ORDER)

    unknown = [name for name in names if name not in DEMOS]
    if unknown:
        for name in unknown:
            print(
                f"{PREFIX_ERROR} "
                + AppStrings.UNKNOWN_DEMO.format(
                    name=name, available=", ".join(DEMO_ORDER)
                )
            )
        return 2

    # Light / RemoteControl 等 QObject 需要 application 實例
    app = QCoreApplication.instance() or QCoreApplication(sys.argv[:1])

    for name in names:
        print(AppStrings.HEADER.format(name=name))
        DEMOS[name]()

    app.processEvents()
    return 0


def main():
    sys.exit(run(sys.argv[1:]))


if __name__ == "__main__":
    main()
