"""
Session 與 API 呼叫相關的資料模型
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List, Optional

# NETIM 的登入 / 登出操作名稱
OPEN_OPERATION = "sessionOpen"
LOGIN_OPERATION = "login"  # 多一個 client 版本參數
OPEN_OPERATIONS = frozenset({OPEN_OPERATION, LOGIN_OPERATION})
CLOSE_OPERATION = "sessionClose"


class SessionState(str, Enum):
    DISCONNECTED = "disconnected"
    CONNECTED = "connected"


@dataclass
class Session:
    """目前的 NETIM session（只由 SessionManager 修改）"""

    state: SessionState = SessionState.DISCONNECTED
    token: Optional[str] = None

    @property
    def is_connected(self) -> bool:
        return self.state is SessionState.CONNECTED


class OperationKind(str, Enum):
    OPEN = "open"
    CLOSE = "close"
    BUSINESS = "business"


@dataclass(frozen=True)
class Operation:
    """依操作名稱解析出的操作類型：登入、登出或一般業務操作"""

    kind: OperationKind
    name: str

    @classmethod
    def resolve(cls, name: str) -> "Operation":
        if name in OPEN_OPERATIONS:
            return cls(OperationKind.OPEN, name)
        if name == CLOSE_OPERATION:
            return cls(OperationKind.CLOSE, name)
        return cls(OperationKind.BUSINESS, name)

    @property
    def is_meta(self) -> bool:
        """登入 / 登出操作不會更新 Diagnostics"""
        return self.kind is not OperationKind.BUSINESS


@dataclass
class CommandRequest:
    """單次 API 呼叫"""

    operation_name: str
    arguments: List[Any] = field(default_factory=list)


@dataclass
class Diagnostics:
    """最後一次業務操作的請求與回應，只用於觀察與除錯"""

    last_operation_name: Optional[str] = None
    last_arguments: List[Any] = field(default_factory=list)
    last_response: Any = None
    last_error: Optional[str] = None
