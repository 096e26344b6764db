"""
全域常數與字串
所有範例的主控台訊息集中在此，方便測試與翻譯
"""

from typing import Optional

# ==============================================================================
# 設定
# ==============================================================================

# 撤銷歷史上限（None 表示不限制）
DEFAULT_MAX_HISTORY: Optional[int] = None

# 執行順序（app.run 未指定範例時依此順序執行）
DEMO_ORDER = (
    "command",
    "memento",
    "state",
    "abstract_factory",
    "builder",
    "adapter",
    "decorator",
    "proxy",
)

# 訊息前綴
PREFIX_INFO = "[*]"
PREFIX_WARNING = "[Warning]"
PREFIX_ERROR = "[Error]"


# ==============================================================================
# 字串常數
# ==============================================================================


class CommandStrings:
    """Command 範例字串"""

    LIGHT_ON = "Light is on"
    LIGHT_OFF = "Light is off"
    LIGHT_ALREADY_ON = "Light is already on"
    LIGHT_ALREADY_OFF = "Light is already off"
    LIGHT_UNREACHABLE = "Light '{name}' is unreachable"

    DESC_LIGHT_ON = "Turn on {name}"
    DESC_LIGHT_OFF = "Turn off {name}"

    NOTHING_TO_UNDO = "No commands to undo"
    NOTHING_TO_REDO = "No commands to redo"
    UNDO = "Undo: {description}"
    REDO = "Redo: {description}"


class MementoStrings:
    """Memento 範例字串"""

    SAVING = "Caretaker: Saving Editor's state..."
    RESTORING = "Caretaker: Restoring state..."
    NOTHING_TO_RESTORE = "Caretaker: Nothing to restore"
    CURRENT_CONTENT = "Current Content:\n{content}"
    AFTER_UNDO = "After Undo:\n{content}"


class StateStrings:
    """State 範例字串"""

    STARTING = "Starting connection..."
    CONNECTED = "Connected."
    ALREADY_CONNECTED = "Already connected. No action needed."
    DISCONNECTING = "Disconnecting..."
    DISCONNECTED = "Disconnected."
    ALREADY_DISCONNECTED = "Already disconnected."
    CANCELLING = "Cancelling connection..."


class ThemeStrings:
    """Abstract Factory 範例字串"""

    THEME_LIGHT = "light"
    THEME_DARK = "dark"

    DRAW_BUTTON = "Drawing a {theme}-themed button."
    TOGGLE_SWITCH = "Toggling a {theme}-themed switch."
    UNKNOWN_THEME = "Unknown theme: {name}"


class BuilderStrings:
    """Builder 範例字串"""

    NONE = "no"
    DESCRIBE = "Computer with {hdd} HDD and {ram} RAM"
    NOTHING_CONSTRUCTED = "No computer has been constructed yet"


class AdapterStrings:
    """Adapter 範例字串"""

    AVAILABLE = "Available products: {products}"
    SEPARATOR = ", "


class DecoratorStrings:
    """Decorator 範例字串"""

    BASIC = "Basic Notification"
    URGENT = "Urgent: {description}"
    ICON = "{description} [🔔]"


class ProxyStrings:
    """Proxy 範例字串"""

    GRANTED = "Access to secured content granted"
    DENIED = "Access denied: user is not authenticated"


class AppStrings:
    """app 入口字串"""

    HEADER = "===== {name} ====="
    UNKNOWN_DEMO = "Unknown demo: {name} (available: {available})"
