"""
NETIM session 生命週期管理

狀態只有 DISCONNECTED / CONNECTED 兩種，所有狀態變化都經過 _transition。
一個 SessionManager 只持有一個 session token，不可跨執行緒共用，
每個呼叫端應使用自己的實例。

NETIM 每個帳號可同時開啟的 session 數量有限，用完請呼叫 close()（或使用 with）。
程式結束時的 atexit 關閉只是最後防線，長時間執行的程式不能依賴它。
"""

import atexit
import re
import weakref
from typing import Any, List, Optional

import structlog

from src.netim_connector.core.exceptions import NetimAPIError, RemoteFault, SessionOpenError
from src.netim_connector.core.models.session import (
    CLOSE_OPERATION,
    LOGIN_OPERATION,
    OPEN_OPERATION,
    Operation,
    OperationKind,
    Session,
    SessionState,
)
from src.netim_connector.infrastructure.api.transport import Transport

logger = structlog.get_logger()

# sessionClose 時 session 已失效的錯誤代碼
STALE_SESSION_CODE = "E02"
_STALE_SESSION_PATTERN = re.compile(rf"\b{STALE_SESSION_CODE}\b")

# 目前持有 session 的實例（弱參照，程式結束時統一關閉）
_open_managers: "weakref.WeakSet[SessionManager]" = weakref.WeakSet()


def _close_open_sessions() -> None:
    for manager in list(_open_managers):
        try:
            manager.close()
        except NetimAPIError as e:
            logger.warning("Failed to close NETIM session at exit", error=str(e))


atexit.register(_close_open_sessions)


class SessionManager:
    """管理 NETIM 的登入 / 登出，並在需要時自動開啟 session"""

    def __init__(
        self,
        transport: Transport,
        user_id: str,
        password: str,
        language: str = "EN",
        client_version: Optional[str] = None,
    ):
        """
        Args:
            transport: 遠端呼叫的傳輸層
            user_id: NETIM Reseller ID（登入時會轉為大寫）
            password: NETIM 密碼
            language: session 語言（EN / FR）
            client_version: 設定時改用 login 操作並附上版本字串
        """
        self.transport = transport
        self.user_id = user_id
        self.password = password
        self.language = language
        self.client_version = client_version
        self.session = Session()

    @property
    def state(self) -> SessionState:
        return self.session.state

    @property
    def token(self) -> Optional[str]:
        return self.session.token

    @property
    def is_connected(self) -> bool:
        return self.session.is_connected

    def open_operation(self) -> Operation:
        return Operation.resolve(LOGIN_OPERATION if self.client_version else OPEN_OPERATION)

    def open_arguments(self, operation: Optional[Operation] = None) -> List[Any]:
        """登入參數；只有 login 會附上 client 版本（未設定時送空字串）"""
        operation = operation or self.open_operation()
        arguments = [self.user_id.upper(), self.password, self.language]
        if operation.name == LOGIN_OPERATION:
            arguments.append(self.client_version or "")
        return arguments

    def execute(self, operation: Operation, arguments: Optional[List[Any]] = None) -> Any:
        """
        執行一個操作

        - 已斷線時的 close、已連線時的 open：不呼叫遠端，直接回傳 None
        - 斷線狀態下的業務操作：先開啟一次 session
        - 除了 open 以外，session token 會加在參數最前面

        Raises:
            SessionOpenError: 開啟 session 失敗
            NetimAPIError: 遠端操作失敗
        """
        arguments = list(arguments or [])

        if operation.kind is OperationKind.CLOSE and not self.is_connected:
            return None
        if operation.kind is OperationKind.OPEN:
            if self.is_connected:
                return None
            return self._invoke(operation, arguments or self.open_arguments(operation))

        if operation.kind is OperationKind.BUSINESS and not self.is_connected:
            self.open()

        return self._invoke(operation, [self.token] + arguments)

    def open(self) -> None:
        operation = self.open_operation()
        self.execute(operation, self.open_arguments(operation))

    def close(self) -> None:
        self.execute(Operation.resolve(CLOSE_OPERATION))

    def _invoke(self, operation: Operation, arguments: List[Any]) -> Any:
        try:
            result = self.transport.call(operation.name, arguments)
        except RemoteFault as fault:
            if operation.kind is OperationKind.CLOSE and self._is_stale_session(fault):
                logger.info("NETIM session already invalid on close", code=fault.code)
                self._transition(operation, None)
                return None

            error_class = SessionOpenError if operation.kind is OperationKind.OPEN else NetimAPIError
            raise error_class(
                fault.message,
                code=fault.code,
                operation=operation.name,
            ) from fault

        self._transition(operation, result)
        return result

    def _transition(self, operation: Operation, result: Any) -> None:
        """唯一的狀態轉換函數"""
        if operation.kind is OperationKind.OPEN:
            self.session.token = str(result)
            self.session.state = SessionState.CONNECTED
            _open_managers.add(self)
            logger.info("NETIM session opened", operation=operation.name, user_id=self.user_id.upper())
        elif operation.kind is OperationKind.CLOSE:
            self.session.token = None
            self.session.state = SessionState.DISCONNECTED
            _open_managers.discard(self)
            logger.info("NETIM session closed")

    @staticmethod
    def _is_stale_session(fault: RemoteFault) -> bool:
        return fault.code == STALE_SESSION_CODE or bool(_STALE_SESSION_PATTERN.search(fault.message or ""))

    def __enter__(self) -> "SessionManager":
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()
