"""
cli/app.py - 메인 CLI 엔트리포인트

Click 기반의 CLI 애플리케이션 진입점입니다.

명령어 구조:
    rosa-services --version                 # 버전 표시
    rosa-services create service ...        # 관리형 서비스 생성
    rosa-services list services             # 관리형 서비스 목록

아키텍처:
    1. get_version(): core.config에서 버전 정보 로드
    2. cli(): Click 그룹 - 메인 엔트리포인트 (--debug, --lang)
    3. create / list 그룹에 하위 명령 등록

Usage:
    $ rosa-services list services
    $ python -m cli.app create service --service=service1 --clusterName=cluster1
"""

import logging

import click
from click import Context

from cli.i18n import t

# WARNING 레벨로 설정하여 라이브러리 로그가 명령 출력에 섞이지 않도록 함
logging.basicConfig(
    level=logging.WARNING,
    format="%(asctime)s - %(levelname)s - %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)

PROG_NAME = "rosa-services"


def get_version() -> str:
    """버전 문자열 반환"""
    from core.config import get_version as config_get_version

    return config_get_version()


VERSION = get_version()


def _build_help_text() -> str:
    """help 텍스트 생성"""
    lines = [
        "ROSA Services CLI",
        "",
        t("cli.help_intro"),
        "",
        "\b",  # Click 줄바꿈 유지 마커
        t("cli.help_basic_usage"),
        f"  {PROG_NAME} create service --service=<name> --clusterName=<name>   {t('cli.help_create_service')}",
        f"  {PROG_NAME} list services                                          {t('cli.help_list_services')}",
        "",
        t("cli.help_addon_parameters"),
    ]
    return "\n".join(lines)


@click.group()
@click.version_option(VERSION, prog_name=PROG_NAME)
@click.option("--debug", is_flag=True, help=t("cli.option_debug"))
@click.option(
    "--lang",
    type=click.Choice(["en", "ko"]),
    default="en",
    help=t("cli.option_lang"),
)
@click.pass_context
def cli(ctx: Context, debug: bool, lang: str) -> None:
    """ROSA Services CLI"""
    from cli.i18n import set_lang

    set_lang(lang)

    if debug:
        from cli.ui.console import enable_debug

        enable_debug()

    ctx.ensure_object(dict)
    ctx.obj["lang"] = lang
    ctx.obj["debug"] = debug


# help 텍스트 동적 설정
cli.help = _build_help_text()


@cli.group("create", help=t("cli.group_create"))
def create_group() -> None:
    pass


@cli.group("list", help=t("cli.group_list"))
def list_group() -> None:
    pass


def _register_commands() -> None:
    """하위 명령 등록 (별칭은 hidden으로)"""
    from cli.commands.create_service import create_service_command
    from cli.commands.list_services import list_services_command

    create_group.add_command(create_service_command, name="service")
    list_group.add_command(list_services_command, name="services")

    alias = click.Command(
        name="service",
        callback=list_services_command.callback,
        params=list_services_command.params,
        help=list_services_command.help,
        hidden=True,
    )
    list_group.add_command(alias)


_register_commands()


if __name__ == "__main__":
    cli()
