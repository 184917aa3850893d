"""
tests/cli/test_list_services_command.py - list services 명령 테스트
"""

import json
from unittest.mock import patch

import pytest
from click.testing import CliRunner

from cli.app import cli
from cli.commands.list_services import render_services
from core.exceptions import ConnectionSetupError, OCMAPIError
from core.ocm import ManagedService


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def mock_ocm(fake_ocm_client):
    with patch("cli.commands.common.OCMClient") as mock_client_cls:
        mock_client_cls.build.return_value = fake_ocm_client
        yield fake_ocm_client


class TestRenderServices:
    def test_header_only(self):
        assert render_services([]) == "ID  SERVICE  STATE"

    def test_columns_aligned(self):
        services = [
            ManagedService(id="1a2b3c", service="service1", state="ready"),
            ManagedService(id="x", service="s", state="installing"),
        ]

        lines = render_services(services).splitlines()

        assert lines == [
            "ID      SERVICE   STATE",
            "1a2b3c  service1  ready",
            "x       s         installing",
        ]


class TestListServicesCommand:
    """list services 실행 테스트"""

    def test_no_records_prints_header(self, runner, mock_ocm):
        result = runner.invoke(cli, ["list", "services"])

        assert result.exit_code == 0
        assert result.stdout == "ID  SERVICE  STATE\n"
        mock_ocm.list_managed_services.assert_called_once_with(1000)
        mock_ocm.close.assert_called_once()

    def test_records(self, runner, mock_ocm):
        mock_ocm.list_managed_services.return_value = [
            ManagedService(id="svc-1", service="service1", state="ready"),
        ]

        result = runner.invoke(cli, ["list", "services"])

        assert result.exit_code == 0
        assert result.stdout.splitlines()[1].split() == ["svc-1", "service1", "ready"]

    def test_json_output(self, runner, mock_ocm):
        raw = {"id": "svc-1", "service": "service1", "service_state": "ready"}
        mock_ocm.list_managed_services.return_value = [ManagedService.from_dict(raw)]

        result = runner.invoke(cli, ["list", "services", "-o", "json"])

        assert result.exit_code == 0
        assert json.loads(result.stdout) == [raw]

    def test_alias(self, runner, mock_ocm):
        result = runner.invoke(cli, ["list", "service"])

        assert result.exit_code == 0
        assert result.stdout == "ID  SERVICE  STATE\n"

    def test_list_failure(self, runner, mock_ocm):
        mock_ocm.list_managed_services.side_effect = OCMAPIError("GET /api/service_mgmt/v1/services", 500)

        result = runner.invoke(cli, ["list", "services"])

        assert result.exit_code == 1
        assert "Failed to retrieve list of managed services" in result.stderr
        assert result.stdout == ""
        mock_ocm.close.assert_called_once()

    def test_connection_failure(self, runner):
        with patch("cli.commands.common.OCMClient") as mock_client_cls:
            mock_client_cls.build.side_effect = ConnectionSetupError("Not logged in")

            result = runner.invoke(cli, ["list", "services"])

        assert result.exit_code == 1
        assert "Failed to create OCM connection: Not logged in" in result.stderr

    def test_close_failure_keeps_exit_code(self, runner, mock_ocm):
        mock_ocm.close.side_effect = RuntimeError("already closed")

        result = runner.invoke(cli, ["list", "services"])

        assert result.exit_code == 0
        assert "Failed to close OCM connection: already closed" in result.stderr
        assert result.stdout == "ID  SERVICE  STATE\n"

    def test_korean_messages(self, runner, mock_ocm):
        mock_ocm.list_managed_services.side_effect = OCMAPIError("GET", 500)

        result = runner.invoke(cli, ["--lang", "ko", "list", "services"])

        assert result.exit_code == 1
        assert "Failed to retrieve" not in result.stderr
