"""
NETIM API 傳輸層

核心只依賴 Transport.call(operation_name, arguments)；任何失敗都必須以 RemoteFault
（訊息 + 錯誤代碼）拋出。HttpTransport 以 JSON over HTTP 呼叫遠端操作：

    POST <api_url>
    {"method": "domainInfo", "params": ["<session token>", "example.com"]}

    -> {"result": {...}}
    -> {"error": {"code": "E02", "message": "Session expired"}}
"""

from abc import ABC, abstractmethod
from typing import Any, List, Optional

import requests
import structlog

from src.netim_connector.core.exceptions import RemoteFault

logger = structlog.get_logger()


class Transport(ABC):
    """遠端程序呼叫介面"""

    @abstractmethod
    def call(self, operation_name: str, arguments: List[Any]) -> Any:
        """
        呼叫遠端操作

        Raises:
            RemoteFault: 遠端或網路錯誤
        """

    def close(self) -> None:
        """釋放底層連線資源"""


class HttpTransport(Transport):
    """以 requests 實作的 JSON over HTTP 傳輸"""

    def __init__(self, api_url: str, timeout: Optional[float] = None, session: Optional[requests.Session] = None):
        self.api_url = api_url
        self.timeout = timeout  # None 表示沿用 requests 預設（不逾時）
        self.http = session or requests.Session()
        self.http.headers.update({"Content-Type": "application/json", "Accept": "application/json"})

    def call(self, operation_name: str, arguments: List[Any]) -> Any:
        payload = {"method": operation_name, "params": list(arguments)}

        try:
            response = self.http.post(self.api_url, json=payload, timeout=self.timeout)
        except requests.Timeout as e:
            logger.warning("NETIM request timeout", operation=operation_name, timeout=self.timeout)
            raise RemoteFault(f"Request timeout: {e}", code="TIMEOUT") from e
        except requests.RequestException as e:
            logger.warning("NETIM request failed", operation=operation_name, error=str(e))
            raise RemoteFault(str(e), code="NETWORK") from e

        try:
            body = response.json()
        except ValueError:
            body = None

        error = body.get("error") if isinstance(body, dict) else None
        if error:
            if isinstance(error, dict):
                raise RemoteFault(str(error.get("message", "")), code=error.get("code"))
            raise RemoteFault(str(error))

        if not response.ok:
            raise RemoteFault(
                f"HTTP {response.status_code}: {response.text[:200]}",
                code=str(response.status_code),
            )

        if not isinstance(body, dict) or "result" not in body:
            raise RemoteFault("Malformed response: missing 'result'", code="PROTOCOL")

        return body["result"]

    def close(self) -> None:
        self.http.close()
