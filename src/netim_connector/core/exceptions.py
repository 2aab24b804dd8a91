"""
自定義異常類別，用於 NETIM API 呼叫的錯誤分類和用戶友善的錯誤訊息
"""

from typing import Optional, Dict, Any

from simple_config import settings


class NetimConnectorException(Exception):
    """基礎異常類別"""

    def __init__(self, message: str, user_message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.user_message = user_message  # 顯示給用戶的訊息
        self.details = details or {}  # 額外的除錯資訊


# ==================== 傳輸層 ====================


class RemoteFault(Exception):
    """
    傳輸層回報的遠端錯誤

    只由 Transport 實作拋出，Dispatcher 一律會包裝成 NetimAPIError。
    """

    def __init__(self, message: str, code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.code = code

    def __str__(self) -> str:
        if self.code:
            return f"[{self.code}] {self.message}"
        return self.message


# ==================== API 呼叫相關異常 ====================


class NetimAPIError(NetimConnectorException):
    """NETIM API 呼叫失敗（網路、協定或遠端業務拒絕）"""

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        operation: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.code = code
        self.operation = operation
        user_message = "🌐 NETIM API 呼叫失敗\n\n"
        if operation:
            user_message += f"操作：{operation}\n"
        if code:
            user_message += f"錯誤代碼：{code}\n"
        user_message += f"訊息：{message}"
        super().__init__(message, user_message, details)

    def __str__(self) -> str:
        return f"{type(self).__name__}: [{self.code or 0}]: {self.args[0]}"


class SessionOpenError(NetimAPIError):
    """無法建立 NETIM session（登入失敗）"""

    pass


class ConfigurationError(NetimConnectorException):
    """NETIM 連線設定缺漏"""

    def __init__(self, missing_settings: list, details: Optional[Dict[str, Any]] = None):
        message = f"NETIM configuration incomplete, missing: {', '.join(missing_settings)}"
        user_message = "🔧 NETIM 連線設定不完整\n\n請通知 IT 檢查環境變數：\n"
        for name in missing_settings:
            user_message += f"• {name.upper()}\n"
        super().__init__(message, user_message, details)


# ==================== 輔助函數 ====================


def get_user_friendly_message(exception: Exception, verbose: Optional[bool] = None) -> str:
    """
    從異常中提取用戶友善的錯誤訊息

    Args:
        exception: 異常物件
        verbose: 是否顯示詳細的技術錯誤訊息（開發模式），預設取自 settings.verbose_errors

    Returns:
        用戶友善的錯誤訊息
    """
    if verbose is None:
        verbose = settings.verbose_errors

    if isinstance(exception, NetimConnectorException):
        message = exception.user_message
        if verbose:
            message += f"\n\n【技術細節】\n錯誤類型：{type(exception).__name__}\n錯誤訊息：{exception.args[0]}"
            if exception.details:
                message += f"\n額外資訊：{exception.details}"
        return message

    # 非自定義異常，返回預設訊息
    if verbose:
        return f"❌ 系統錯誤\n\n【技術細節】\n{type(exception).__name__}: {str(exception)}"
    else:
        return "❌ 系統錯誤，請稍後重試"
