import pytest
import os
import sys
import weakref
from unittest.mock import Mock, patch

# 添加項目根目錄到 Python 路徑
sys.path.append(os.path.join(os.path.dirname(__file__), '..'))

from src.netim_connector.core.models.contact import RawContact
from src.netim_connector.infrastructure.api.session_manager import SessionManager
from src.netim_connector.infrastructure.api.transport import Transport

SESSION_TOKEN = "session-token-123"


def _build_transport(responses=None, faults=None):
    responses = responses or {}
    faults = faults or {}
    transport = Mock(spec=Transport)

    def fake_call(operation_name, arguments):
        if operation_name in faults:
            raise faults[operation_name]
        if operation_name in responses:
            return responses[operation_name]
        if operation_name in ("sessionOpen", "login"):
            return SESSION_TOKEN
        if operation_name == "sessionClose":
            return None
        return {"STATUS": "Done", "operation": operation_name}

    transport.call.side_effect = fake_call
    return transport


@pytest.fixture
def make_transport():
    """建立模擬傳輸層：responses / faults 以操作名稱指定回傳值或 RemoteFault"""
    return _build_transport


@pytest.fixture
def mock_transport():
    """預設的模擬傳輸層"""
    return _build_transport()


@pytest.fixture
def session_manager(mock_transport):
    """使用模擬傳輸層的 SessionManager"""
    return SessionManager(mock_transport, user_id="reseller", password="secret")


@pytest.fixture(autouse=True)
def open_managers():
    """每個測試使用獨立的已開啟 session 集合，避免程式結束時關閉模擬的 session"""
    managers = weakref.WeakSet()
    with patch("src.netim_connector.infrastructure.api.session_manager._open_managers", managers):
        yield managers


@pytest.fixture
def sample_raw_contact():
    """範例聯絡人資料（法國個人）"""
    return RawContact(
        first_name="Zoë",
        last_name="O’Brien",
        address1="12 rue de l’Église",
        zip_code="75001",
        city="Paris",
        country="France",
        phone="06 12 34 56 78",
        email="zoe@example.fr",
        language="fr",
        is_owner=1,
    )


@pytest.fixture
def sample_us_contact():
    """範例聯絡人資料（美國組織）"""
    return RawContact(
        first_name="John",
        last_name="Smith",
        body_name="Acme — Corp",
        address1="1 Market St",
        zip_code="94105",
        state="California",
        city="San Francisco",
        country="United States",
        phone="+1 (415) 555-0100",
        fax="+1 415 555 0101",
        email="john@acme.example",
    )


@pytest.fixture(autouse=True)
def setup_env():
    """設置測試環境變數"""
    test_env = {
        'NETIM_USERNAME': 'test_reseller',
        'NETIM_PASSWORD': 'test_password',
        'NETIM_SANDBOX': 'true',
    }

    with patch.dict(os.environ, test_env):
        yield
