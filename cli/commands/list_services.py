"""
cli/commands/list_services.py - 관리형 서비스 목록 명령

최대 1000개를 한 번에 조회해 ID / SERVICE / STATE 탭 정렬 표로 출력합니다.
"""

from __future__ import annotations

import json

import click

from cli.commands.common import close_ocm_client, open_ocm_client
from cli.i18n import t
from cli.ui.console import format_tab_table, print_error
from core.config import MANAGED_SERVICES_PAGE_SIZE
from core.exceptions import OCMAPIError
from core.ocm import ManagedService

HEADERS = ["ID", "SERVICE", "STATE"]


def render_services(services: list[ManagedService]) -> str:
    rows = [[service.id, service.service, service.state] for service in services]
    return format_tab_table(HEADERS, rows)


def run(output: str | None = None) -> int:
    """list services 실행

    Returns:
        0: 성공
        1: 실패
    """
    ocm_client = open_ocm_client()
    if ocm_client is None:
        return 1

    try:
        services = ocm_client.list_managed_services(MANAGED_SERVICES_PAGE_SIZE)
    except OCMAPIError as e:
        print_error(t("service.list_failed", error=e))
        return 1
    finally:
        close_ocm_client(ocm_client)

    if output == "json":
        click.echo(json.dumps([service.raw for service in services], ensure_ascii=False, indent=2))
    else:
        click.echo(render_services(services))
    return 0


@click.command("services")
@click.option(
    "-o",
    "--output",
    type=click.Choice(["json"]),
    default=None,
    help="Output format. Allowed formats are [json].",
)
def list_services_command(output: str | None) -> None:
    """List managed services.

    \b
    Examples:
        # List all managed services
        rosa-services list services
    """
    exit_code = run(output)
    if exit_code:
        raise SystemExit(exit_code)
