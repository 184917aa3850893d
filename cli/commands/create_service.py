"""
cli/commands/create_service.py - 관리형 서비스 생성 명령

순서 (각 단계 실패 시 에러 출력 후 종료 코드 1):
    1. Account Role 탐색 (Installer → 접두사 → Support/ControlPlane/Worker)
    2. Operator Role 계획 및 이름 사용 가능 여부 확인
    3. AWS 계정 ID / 리전 확인
    4. Add-on 파라미터 스키마 조회 후 CLI 플래그 값 복사 (조회 실패 시 파라미터 없이 진행)
    5. 서비스 생성 요청, 후속 명령 안내

Usage:
    rosa-services create service --service=service1 --clusterName=cluster1
    rosa-services create service --service=service1 --clusterName=cluster1 --my-param=value
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field

import click

from cli.commands.common import close_ocm_client, open_ocm_client
from cli.i18n import t
from cli.ui.console import print_debug, print_error, print_info, print_success, print_warning
from core.aws import AWSClient
from core.config import DEFAULT_OPENSHIFT_VERSION
from core.exceptions import (
    APICallError,
    ConfigError,
    OCMAPIError,
    RoleNameCollisionError,
    RoleResolutionError,
    VersionError,
)
from core.ocm import CreateManagedServiceArgs, OCMClient, get_version_minor
from core.services import (
    follow_up_commands,
    get_operator_roles_prefix,
    parse_extra_flags,
    plan_operator_roles,
    resolve_account_roles,
    validate_operator_roles,
    with_account_roles,
    with_addon_parameters,
    with_aws_identity,
    with_operator_roles,
)


@dataclass
class CreateServiceOptions:
    """create service 명령 옵션"""

    service_name: str
    cluster_name: str
    profile: str | None = None
    region: str | None = None
    openshift_version: str = DEFAULT_OPENSHIFT_VERSION
    # Add-on 파라미터 후보 (--<id>=<value>)
    flags: Mapping[str, str] = field(default_factory=dict)


class StepFailed(Exception):
    """단계 실패 (메시지는 이미 출력됨)"""


def run(options: CreateServiceOptions) -> int:
    """create service 실행

    Returns:
        0: 성공
        1: 실패
    """
    for name, value in (("service", options.service_name), ("clusterName", options.cluster_name)):
        if not value:
            print_error(t("service.missing_option", name=name))
            return 1

    ocm_client = open_ocm_client()
    if ocm_client is None:
        return 1

    try:
        _create_service(ocm_client, options)
    except StepFailed:
        return 1
    finally:
        close_ocm_client(ocm_client)

    return 0


def _create_service(ocm_client: OCMClient, options: CreateServiceOptions) -> None:
    try:
        aws_client = AWSClient.create(profile=options.profile, region=options.region)
    except ConfigError as e:
        print_error(t("service.aws_client_failed", error=e))
        raise StepFailed from e

    args = CreateManagedServiceArgs(service_name=options.service_name, cluster_name=options.cluster_name)
    minor = get_version_minor(options.openshift_version)

    args = _resolve_account_roles(aws_client, args, minor)
    account_id, args = _resolve_operator_roles(aws_client, args, options.openshift_version)

    try:
        region = aws_client.get_region()
    except ConfigError as e:
        print_error(t("service.region_failed", error=e))
        raise StepFailed from e
    print_info(t("service.using_region", region=region))
    args = with_aws_identity(args, account_id, region)

    # Add-on 조회 실패는 파라미터 없이 계속 진행
    addon = None
    try:
        addon = ocm_client.get_addon(options.service_name)
    except OCMAPIError as e:
        print_error(t("service.parameters_failed", error=e))
    args = with_addon_parameters(args, addon, options.flags)

    try:
        service = ocm_client.create_managed_service(args)
    except OCMAPIError as e:
        print_error(t("service.create_failed", error=e))
        raise StepFailed from e

    print_success(str(service))

    commands = "".join(f"\t{command}\n" for command in follow_up_commands(args.cluster_name))
    print_info(f"{t('service.follow_up')}\n\n{commands}")


def _resolve_account_roles(
    aws_client: AWSClient,
    args: CreateManagedServiceArgs,
    minor: str,
) -> CreateManagedServiceArgs:
    try:
        resolution = resolve_account_roles(aws_client, minor)
    except RoleResolutionError as e:
        for failure in e.failures:
            print_error(failure)
        print_error(e.message)
        raise StepFailed from e
    except APICallError as e:
        print_error(t("service.find_role_failed", error=e))
        raise StepFailed from e

    for warning in resolution.warnings:
        print_warning(warning)
    for message in resolution.messages:
        print_info(message)
    print_debug(t("service.role_prefix", prefix=resolution.prefix))

    return with_account_roles(args, resolution)


def _resolve_operator_roles(
    aws_client: AWSClient,
    args: CreateManagedServiceArgs,
    version: str,
) -> tuple[str, CreateManagedServiceArgs]:
    try:
        creator = aws_client.get_creator()
    except APICallError as e:
        print_error(t("service.credentials_failed", error=e))
        raise StepFailed from e

    prefix = get_operator_roles_prefix(args.cluster_name)
    try:
        roles = plan_operator_roles(prefix, version, creator.account_id)
    except VersionError as e:
        print_error(t("service.operator_version_failed", error=e))
        raise StepFailed from e

    try:
        validate_operator_roles(aws_client, roles)
    except (RoleNameCollisionError, APICallError) as e:
        print_error(t("service.validate_role_failed", error=e))
        raise StepFailed from e

    return creator.account_id, with_operator_roles(args, roles)


@click.command(
    "service",
    context_settings={"ignore_unknown_options": True, "allow_extra_args": True},
)
@click.option("--service", "service_name", default="", help="Name of the service.")
@click.option("--clusterName", "cluster_name", default="", help="Name of the cluster.")
@click.option("-p", "--profile", default=None, help="AWS profile to use.")
@click.option("-r", "--region", default=None, help="AWS region to use.")
@click.option(
    "--openshift-version",
    default=DEFAULT_OPENSHIFT_VERSION,
    show_default=True,
    help="OpenShift version of the cluster.",
)
@click.pass_context
def create_service_command(
    ctx: click.Context,
    service_name: str,
    cluster_name: str,
    profile: str | None,
    region: str | None,
    openshift_version: str,
) -> None:
    """Creates a managed service.

    Managed Services are OpenShift clusters that provide a specific function.
    Add-on parameters are passed as --<parameter id>=<value>.

    \b
    Examples:
        # Create a Managed Service using service1.
        rosa-services create service --service=service1 --clusterName=clusterName
    """
    options = CreateServiceOptions(
        service_name=service_name,
        cluster_name=cluster_name,
        profile=profile,
        region=region,
        openshift_version=openshift_version,
        flags=parse_extra_flags(ctx.args),
    )
    exit_code = run(options)
    if exit_code:
        raise SystemExit(exit_code)
