"""
tests/core/test_exceptions.py - 예외 계층 테스트
"""

import pytest
from botocore.exceptions import NoCredentialsError
from conftest import create_mock_client_error

from core.exceptions import (
    APICallError,
    ConfigError,
    OCMAPIError,
    RoleNameCollisionError,
    RoleResolutionError,
    RosaError,
    VersionError,
    is_not_found,
)


class TestRosaError:
    """RosaError 베이스 테스트"""

    def test_str_without_cause(self):
        assert str(RosaError("boom")) == "boom"

    def test_str_with_cause(self):
        error = RosaError("boom", cause=ValueError("inner"))
        assert str(error) == "boom: inner"

    def test_to_dict(self):
        error = ConfigError("region", "Region is not set")
        data = error.to_dict()

        assert data["error_type"] == "ConfigError"
        assert data["message"] == "Region is not set"
        assert data["details"] == {"config_key": "region"}

    @pytest.mark.parametrize(
        "error",
        [
            ConfigError("k", "m"),
            OCMAPIError("GET /api"),
            APICallError("iam", "get_role"),
            RoleResolutionError("m"),
            RoleNameCollisionError("r"),
            VersionError("x"),
        ],
    )
    def test_hierarchy(self, error):
        assert isinstance(error, RosaError)


class TestOCMAPIError:
    """OCMAPIError 메시지 테스트"""

    def test_message_with_status_and_reason(self):
        error = OCMAPIError("GET /api/clusters_mgmt/v1/addons/x", status=404, reason="Add-on 'x' not found")

        assert str(error) == "GET /api/clusters_mgmt/v1/addons/x (404): Add-on 'x' not found"
        assert error.status == 404
        assert error.reason == "Add-on 'x' not found"


class TestAPICallError:
    """APICallError 테스트"""

    def test_from_client_error(self):
        client_error = create_mock_client_error("AccessDenied", "not allowed")

        error = APICallError.from_client_error("iam", "list_roles", client_error)

        assert error.error_code == "AccessDenied"
        assert error.cause is client_error
        assert str(error) == "iam.list_roles failed (AccessDenied): not allowed"

    def test_from_botocore_error_without_response(self):
        botocore_error = NoCredentialsError()

        error = APICallError.from_client_error("iam", "list_roles", botocore_error)

        assert error.error_code is None
        assert error.cause is botocore_error
        assert str(error) == "iam.list_roles: Unable to locate credentials"


class TestRoleErrors:
    """Role 관련 예외 테스트"""

    def test_collision_message(self):
        error = RoleNameCollisionError("c1-abcd-openshift-machine-api-aws-cloud-credentials")
        assert str(error) == "Role 'c1-abcd-openshift-machine-api-aws-cloud-credentials' already exists"

    def test_resolution_failures_default_empty(self):
        assert RoleResolutionError("m").failures == []


class TestErrorHelpers:
    """is_not_found 테스트"""

    def test_is_not_found(self):
        assert is_not_found(create_mock_client_error("NoSuchEntity"))
        assert not is_not_found(ValueError("x"))
        assert is_not_found(APICallError("iam", "get_role", error_code="NoSuchEntity"))
