"""
CommandDispatcher 測試
"""

from unittest.mock import patch

import pytest

from src.netim_connector.core.exceptions import NetimAPIError, RemoteFault, SessionOpenError
from src.netim_connector.infrastructure.api.dispatcher import CommandDispatcher
from src.netim_connector.infrastructure.api.session_manager import SessionManager


def _operations(transport):
    return [c.args[0] for c in transport.call.call_args_list]


class TestDispatch:
    """dispatch 測試"""

    def setup_method(self):
        self.domain_info = {"domain": "example.fr", "status": "ACTIVE"}

    def _dispatcher(self, transport, **kwargs):
        return CommandDispatcher(SessionManager(transport, "reseller", "secret"), **kwargs)

    def test_dispatch_returns_result(self, make_transport):
        transport = make_transport(responses={"domainInfo": self.domain_info})
        dispatcher = self._dispatcher(transport)

        assert dispatcher.dispatch("domainInfo", ["example.fr"]) == self.domain_info

    def test_auto_open_exactly_once(self, make_transport):
        transport = make_transport()
        dispatcher = self._dispatcher(transport)

        dispatcher.dispatch("domainInfo", ["example.fr"])
        dispatcher.dispatch("contactDelete", ["GK521"])
        dispatcher.dispatch("hostCreate", ["ns1.example.fr", "192.0.2.1", ""])

        assert _operations(transport) == ["sessionOpen", "domainInfo", "contactDelete", "hostCreate"]

    def test_open_when_connected_makes_no_call(self, make_transport):
        transport = make_transport()
        dispatcher = self._dispatcher(transport)
        dispatcher.dispatch("sessionOpen")
        transport.call.reset_mock()

        assert dispatcher.dispatch("sessionOpen") is None
        assert transport.call.call_count == 0

    def test_close_when_disconnected_makes_no_call(self, make_transport):
        transport = make_transport()
        dispatcher = self._dispatcher(transport)

        assert dispatcher.dispatch("sessionClose") is None
        assert transport.call.call_count == 0

    def test_invoke_alias(self, make_transport):
        transport = make_transport(responses={"hello": "hi"})
        dispatcher = self._dispatcher(transport)

        assert dispatcher.invoke("hello") == "hi"

    def test_close(self, make_transport):
        transport = make_transport()
        dispatcher = self._dispatcher(transport)
        dispatcher.dispatch("hello")

        dispatcher.close()

        assert _operations(transport)[-1] == "sessionClose"
        assert not dispatcher.session_manager.is_connected
        transport.close.assert_called_once()

    def test_close_releases_transport_when_session_close_fails(self, make_transport):
        transport = make_transport(faults={"sessionClose": RemoteFault("Server unavailable", code="E99")})
        dispatcher = self._dispatcher(transport)
        dispatcher.dispatch("hello")

        with pytest.raises(NetimAPIError):
            dispatcher.close()

        transport.close.assert_called_once()


class TestDiagnostics:
    """最後一次業務操作的診斷資訊"""

    def _dispatcher(self, transport, **kwargs):
        return CommandDispatcher(SessionManager(transport, "reseller", "secret"), **kwargs)

    def test_records_last_business_operation(self, make_transport):
        transport = make_transport(responses={"domainCheck": [{"result": "AVAILABLE"}]})
        dispatcher = self._dispatcher(transport)

        dispatcher.dispatch("domainCheck", ["example.fr"])

        assert dispatcher.last_operation_name == "domainCheck"
        assert dispatcher.last_arguments == ["example.fr"]
        assert dispatcher.last_response == [{"result": "AVAILABLE"}]
        assert dispatcher.last_error is None

    def test_session_operations_not_recorded(self, make_transport):
        transport = make_transport(responses={"domainInfo": {"domain": "example.fr"}})
        dispatcher = self._dispatcher(transport)

        dispatcher.dispatch("domainInfo", ["example.fr"])
        dispatcher.dispatch("sessionClose")
        dispatcher.dispatch("sessionOpen")

        assert dispatcher.last_operation_name == "domainInfo"
        assert dispatcher.last_response == {"domain": "example.fr"}

    def test_new_operation_resets_previous_error(self, make_transport):
        transport = make_transport(faults={"domainInfo": RemoteFault("Domain not found", code="E10")})
        dispatcher = self._dispatcher(transport)

        with pytest.raises(NetimAPIError):
            dispatcher.dispatch("domainInfo", ["missing.fr"])
        dispatcher.dispatch("hello")

        assert dispatcher.last_operation_name == "hello"
        assert dispatcher.last_error is None

    def test_failure_recorded_and_raised(self, make_transport):
        transport = make_transport(faults={"contactDelete": RemoteFault("Contact in use", code="E21")})
        dispatcher = self._dispatcher(transport)

        with pytest.raises(NetimAPIError) as exc_info:
            dispatcher.dispatch("contactDelete", ["GK521"])

        assert exc_info.value.code == "E21"
        assert exc_info.value.operation == "contactDelete"
        assert dispatcher.last_operation_name == "contactDelete"
        assert dispatcher.last_arguments == ["GK521"]
        assert dispatcher.last_error == "Contact in use"
        assert dispatcher.last_response is None

    def test_open_failure_during_business_call(self, make_transport):
        transport = make_transport(faults={"sessionOpen": RemoteFault("Bad credentials", code="E01")})
        dispatcher = self._dispatcher(transport)

        with pytest.raises(SessionOpenError):
            dispatcher.dispatch("domainInfo", ["example.fr"])

        assert dispatcher.last_operation_name == "domainInfo"
        assert dispatcher.last_error == "Bad credentials"

    def test_request_logging_enabled(self, make_transport):
        transport = make_transport()
        dispatcher = self._dispatcher(transport, log_api_requests=True)

        with patch('src.netim_connector.infrastructure.api.dispatcher.logger') as mock_logger:
            dispatcher.dispatch("hello")

        mock_logger.info.assert_called_once()
        assert mock_logger.info.call_args.kwargs["operation"] == "hello"

    def test_request_logging_disabled_by_default(self, make_transport):
        transport = make_transport()
        dispatcher = self._dispatcher(transport)

        with patch('src.netim_connector.infrastructure.api.dispatcher.logger') as mock_logger:
            dispatcher.dispatch("hello")

        mock_logger.info.assert_not_called()
