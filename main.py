try:
    from cli.app import PROG_NAME, cli
except ModuleNotFoundError:
    # 소스 체크아웃에서 직접 실행할 때 프로젝트 루트를 sys.path에 추가
    import os
    import sys

    sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))
    from cli.app import PROG_NAME, cli


def main():
    """rosa-services 진입점 (cli.app:cli에 위임)"""
    cli(prog_name=PROG_NAME)


if __name__ == "__main__":
    main()
