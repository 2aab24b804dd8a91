"""
通用的 NETIM 指令分派

    dispatcher.dispatch("contactDelete", ["GK521"])
    dispatcher.dispatch("hostCreate", [host, ipv4, ipv6])

參數必須依照遠端操作的參數順序排列；session token 由 SessionManager 自動加入。
"""

from typing import Any, List, Optional

import structlog

from src.netim_connector.core.exceptions import NetimAPIError
from src.netim_connector.core.models.session import CommandRequest, Diagnostics, Operation
from src.netim_connector.infrastructure.api.session_manager import SessionManager

logger = structlog.get_logger()


class CommandDispatcher:
    """經由 SessionManager 呼叫任意 NETIM 操作，並保留最後一次業務操作的請求與回應"""

    def __init__(self, session_manager: SessionManager, log_api_requests: bool = False):
        self.session_manager = session_manager
        self.log_api_requests = log_api_requests
        self.diagnostics = Diagnostics()

    def dispatch(self, operation_name: str, arguments: Optional[List[Any]] = None) -> Any:
        """
        呼叫遠端操作

        Args:
            operation_name: NETIM 操作名稱
            arguments: 依順序排列的參數（不含 session token）

        Returns:
            遠端操作的回傳值；冪等的 open / close 直接回傳 None

        Raises:
            NetimAPIError: 遠端操作失敗（SessionOpenError 表示無法登入）
        """
        request = CommandRequest(operation_name, list(arguments or []))
        operation = Operation.resolve(request.operation_name)

        # 登入 / 登出不覆寫呼叫端的業務操作資訊
        track = not operation.is_meta
        if track:
            self.diagnostics = Diagnostics(
                last_operation_name=request.operation_name,
                last_arguments=list(request.arguments),
            )

        try:
            result = self.session_manager.execute(operation, request.arguments)
        except NetimAPIError as e:
            if track:
                self.diagnostics.last_error = e.args[0]
            logger.error("NETIM API request failed",
                         operation=request.operation_name,
                         code=e.code,
                         error=e.args[0],
                         error_type=type(e).__name__)
            raise

        if track:
            self.diagnostics.last_response = result
            if self.log_api_requests:
                logger.info("NETIM API request",
                            operation=request.operation_name,
                            params=request.arguments,
                            response=result)
        return result

    invoke = dispatch

    @property
    def last_operation_name(self) -> Optional[str]:
        return self.diagnostics.last_operation_name

    @property
    def last_arguments(self) -> List[Any]:
        return self.diagnostics.last_arguments

    @property
    def last_response(self) -> Any:
        return self.diagnostics.last_response

    @property
    def last_error(self) -> Optional[str]:
        return self.diagnostics.last_error

    def close(self) -> None:
        """關閉 session 並釋放傳輸層連線"""
        try:
            self.session_manager.close()
        finally:
            self.session_manager.transport.close()
