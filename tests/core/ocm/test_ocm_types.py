"""
tests/core/ocm/test_ocm_types.py - 요청/응답 타입 테스트
"""

from core.ocm.types import AddOn, CreateManagedServiceArgs, ManagedService, OperatorIAMRole

ROLE_ARN = "arn:aws:iam::123456789012:role/c1-abcd-openshift-machine-api-aws-cloud-credentials"


class TestOperatorIAMRole:
    def test_role_name(self):
        role = OperatorIAMRole("aws-cloud-credentials", "openshift-machine-api", ROLE_ARN)

        assert role.role_name == "c1-abcd-openshift-machine-api-aws-cloud-credentials"


class TestCreateManagedServiceArgs:
    """요청 본문 테스트"""

    def test_has_account_roles(self):
        args = CreateManagedServiceArgs("s1", "c1", aws_role_arn="a", aws_support_role_arn="b")
        assert not args.has_account_roles

        args = CreateManagedServiceArgs(
            "s1",
            "c1",
            aws_role_arn="a",
            aws_support_role_arn="b",
            aws_control_plane_role_arn="c",
            aws_worker_role_arn="d",
        )
        assert args.has_account_roles

    def test_to_body(self):
        args = CreateManagedServiceArgs(
            service_name="service1",
            cluster_name="cluster1",
            aws_role_arn="installer",
            aws_support_role_arn="support",
            aws_control_plane_role_arn="controlplane",
            aws_worker_role_arn="worker",
            aws_account_id="123456789012",
            aws_region="us-east-1",
            aws_operator_iam_role_list=[
                OperatorIAMRole("aws-cloud-credentials", "openshift-machine-api", ROLE_ARN),
            ],
            parameters={"size": "3"},
        )

        body = args.to_body()

        assert body["service"] == "service1"
        assert body["parameters"] == [{"id": "size", "value": "3"}]
        cluster = body["cluster"]
        assert cluster["name"] == "cluster1"
        assert cluster["region"] == {"id": "us-east-1"}
        assert cluster["aws"]["account_id"] == "123456789012"
        sts = cluster["aws"]["sts"]
        assert sts["role_arn"] == "installer"
        assert sts["support_role_arn"] == "support"
        assert sts["instance_iam_roles"] == {"master_role_arn": "controlplane", "worker_role_arn": "worker"}
        assert sts["operator_iam_roles"] == [
            {"name": "aws-cloud-credentials", "namespace": "openshift-machine-api", "role_arn": ROLE_ARN}
        ]


class TestManagedService:
    def test_from_dict(self):
        data = {"id": "svc-1", "service": "s1", "service_state": "ready", "href": "/api/x"}

        service = ManagedService.from_dict(data)

        assert service == ManagedService(id="svc-1", service="s1", state="ready", href="/api/x")
        assert service.raw is data

    def test_str(self):
        assert str(ManagedService("svc-1", "s1", "")) == "Service 's1' (svc-1) is pending"
        assert str(ManagedService("svc-1", "s1", "ready", cluster_name="c1")) == (
            "Service 's1' (svc-1) is ready on cluster 'c1'"
        )


class TestAddOn:
    def test_from_dict_without_parameters(self):
        addon = AddOn.from_dict({"id": "s1"})

        assert addon.parameters == []
