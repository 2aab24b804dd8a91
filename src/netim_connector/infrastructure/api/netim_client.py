"""
NETIM API 客戶端

不需要自行開啟或關閉 session，第一次呼叫業務操作時會自動登入。
長時間執行的程式用完請呼叫 close()（或使用 with），避免佔用 session 配額：

    with create_netim_client() as client:
        contact_id = client.contact_create_obj(contact)
        client.domain_create("example.fr", contact_id, ...)
"""

from typing import Any, Dict, List, Optional

import structlog

from simple_config import Settings, settings as default_settings
from src.netim_connector.core.exceptions import ConfigurationError, NetimAPIError
from src.netim_connector.core.models.contact import Contact, NormalizedContact
from src.netim_connector.core.services.contact_normalizer import (
    ContactNormalizer,
    create_contact_normalizer,
)
from src.netim_connector.infrastructure.api.dispatcher import CommandDispatcher
from src.netim_connector.infrastructure.api.session_manager import SessionManager
from src.netim_connector.infrastructure.api.transport import HttpTransport

logger = structlog.get_logger()


def _field(record: Any, name: str) -> Any:
    """API 回傳的資料可能是 dict 或物件"""
    if isinstance(record, dict):
        return record.get(name)
    return getattr(record, name, None)


class NetimClient:
    """NETIM 的 session / 聯絡人 / 網域 / 操作追蹤 API"""

    def __init__(self, dispatcher: CommandDispatcher, normalizer: Optional[ContactNormalizer] = None):
        self.dispatcher = dispatcher
        self.normalizer = normalizer or create_contact_normalizer()

    def _call(self, operation_name: str, *arguments: Any) -> Any:
        return self.dispatcher.dispatch(operation_name, list(arguments))

    # ==================== Misc ====================

    def hello(self) -> str:
        return self._call("hello")

    # ==================== Session ====================

    def session_open(self) -> None:
        self.dispatcher.session_manager.open()

    def session_close(self) -> None:
        self.dispatcher.session_manager.close()

    def session_info(self) -> Any:
        return self._call("sessionInfo")

    def query_all_sessions(self) -> List[Any]:
        return self._call("queryAllSessions")

    def set_preference(self, key: str, value: Any) -> None:
        """
        更新 session 設定，原樣送到 NETIM

        常用設定：lang = EN / FR、sync = 0（非同步）/ 1（同步）、syncDelay
        """
        self._call("sessionSetPreference", key, value)

    # ==================== Operations ====================

    def query_ope(self, operation_id: int) -> Any:
        return self._call("queryOpe", operation_id)

    def query_ope_pending(self) -> List[Any]:
        return self._call("queryOpePending")

    def cancel_ope(self, operation_id: int) -> None:
        self._call("cancelOpe", operation_id)

    def is_already_pending(self, domain: str, code_ope: str) -> bool:
        """檢查某網域是否已有相同類型的待處理操作"""
        domain = domain.lower()
        for ope in self.query_ope_pending() or []:
            if _field(ope, "data_ope") == domain and _field(ope, "code_ope") == code_ope:
                return True
        return False

    # ==================== Contact ====================

    def contact_create(self, contact: Dict[str, Any]) -> str:
        """建立聯絡人，回傳聯絡人 ID"""
        return self._call("contactCreate", contact)

    def contact_info(self, contact_id: str) -> Any:
        return self._call("contactInfo", contact_id)

    def contact_update(self, contact_id: str, contact: Dict[str, Any]) -> Any:
        return self._call("contactUpdate", contact_id, contact)

    def contact_owner_update(self, contact_id: str, contact: Dict[str, Any]) -> Any:
        return self._call("contactOwnerUpdate", contact_id, contact)

    def contact_delete(self, contact_id: str) -> Any:
        return self._call("contactDelete", contact_id)

    def query_contact_list(self, filter: str = "", field: str = "") -> List[Any]:
        return self._call("queryContactList", filter, field)

    def contact_create_obj(self, contact: NormalizedContact) -> str:
        return self.contact_create(contact.to_api())

    def contact_info_obj(self, contact_id: str) -> Contact:
        """取得聯絡人並把州代碼轉回顯示名稱"""
        return self.normalizer.denormalize(Contact.from_api(self.contact_info(contact_id)))

    def contact_update_obj(self, contact_id: str, contact: NormalizedContact) -> Any:
        return self.contact_update(contact_id, contact.to_api())

    def contact_owner_update_obj(self, contact_id: str, contact: NormalizedContact) -> Any:
        return self.contact_owner_update(contact_id, contact.to_api())

    # ==================== Domain ====================

    def domain_check(self, domain: str) -> List[Any]:
        return self._call("domainCheck", domain.lower())

    def domain_info(self, domain: str) -> Any:
        return self._call("domainInfo", domain.lower())

    def domain_create(
        self,
        domain: str,
        id_owner: str,
        id_admin: str,
        id_tech: str,
        id_billing: str,
        ns1: str,
        ns2: str,
        ns3: str = "",
        ns4: str = "",
        ns5: str = "",
        duration: int = 1,
        template_dns: Optional[int] = None,
    ) -> Any:
        arguments = [domain.lower(), id_owner, id_admin, id_tech, id_billing, ns1, ns2, ns3, ns4, ns5, duration]
        if template_dns:
            arguments.append(template_dns)
        return self._call("domainCreate", *arguments)

    def domain_renew(self, domain: str, duration: int) -> Any:
        return self._call("domainRenew", domain.lower(), duration)

    def domain_delete(self, domain: str, type_delete: str = "NOW") -> Any:
        return self._call("domainDelete", domain.lower(), type_delete.upper())

    def domain_transfer_in(
        self,
        domain: str,
        auth_id: str,
        id_owner: str,
        id_admin: str,
        id_tech: str,
        id_billing: str,
        ns1: str = "",
        ns2: str = "",
        ns3: str = "",
        ns4: str = "",
        ns5: str = "",
    ) -> Any:
        return self._call(
            "domainTransferIn",
            domain.lower(), auth_id, id_owner, id_admin, id_tech, id_billing, ns1, ns2, ns3, ns4, ns5,
        )

    def domain_change_dns(self, domain: str, ns1: str, ns2: str, ns3: str = "", ns4: str = "", ns5: str = "") -> Any:
        return self._call("domainChangeDNS", domain.lower(), ns1, ns2, ns3, ns4, ns5)

    def domain_change_contact(self, domain: str, id_admin: str, id_tech: str, id_billing: str) -> Any:
        return self._call("domainChangeContact", domain.lower(), id_admin, id_tech, id_billing)

    def domain_auth_id(self, domain: str, send_to_registrant: int) -> Any:
        return self._call("domainAuthID", domain.lower(), send_to_registrant)

    def domain_set_preference(self, domain: str, code_pref: str, value: Any) -> Any:
        return self._call("domainSetPreference", domain.lower(), code_pref, value)

    def domain_set_registrar_lock(self, domain: str, value: int) -> Any:
        return self.domain_set_preference(domain, "registrar_lock", value)

    def domain_set_whois_privacy(self, domain: str, value: int) -> Any:
        return self.domain_set_preference(domain, "whois_privacy", value)

    def query_domain_list(self, filter: str = "") -> List[Any]:
        return self._call("queryDomainList", filter)

    # ==================== Lifecycle ====================

    def close(self) -> None:
        self.dispatcher.close()

    def __enter__(self) -> "NetimClient":
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()


def create_netim_client(config: Optional[Settings] = None) -> NetimClient:
    """
    依設定建立 NetimClient

    會設定 client 版本（login）並送出 syncDelay session 設定，
    因此建立時就會開啟 session。

    Raises:
        ConfigurationError: 缺少帳號或密碼
        NetimAPIError: 無法登入或設定 session（已開啟的 session 會先關閉）
    """
    config = config or default_settings

    missing = [name for name in ("netim_username", "netim_password") if not getattr(config, name)]
    if missing:
        raise ConfigurationError(missing)

    transport = HttpTransport(config.netim_api_url, timeout=config.netim_request_timeout)
    session_manager = SessionManager(
        transport,
        user_id=config.netim_username,
        password=config.netim_password,
        language=config.netim_default_language,
        client_version=config.netim_client_version,
    )
    dispatcher = CommandDispatcher(session_manager, log_api_requests=config.log_api_requests)
    client = NetimClient(dispatcher)

    logger.info("NETIM client created",
                api_url=config.netim_api_url,
                sandbox=config.netim_sandbox,
                with_version=bool(config.netim_client_version))

    if config.netim_sync_delay is not None:
        try:
            client.set_preference("syncDelay", config.netim_sync_delay)
        except NetimAPIError:
            try:
                client.close()
            except NetimAPIError as e:
                logger.warning("Failed to close NETIM session after setup error", error=str(e))
            raise

    return client
