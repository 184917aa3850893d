"""
tests/cli/test_console.py - 콘솔 출력 유틸리티 테스트
"""

import logging

from cli.ui.console import APP_LOGGERS, enable_debug, format_tab_table


class TestFormatTabTable:
    """탭 정렬 표 테스트"""

    def test_header_only(self):
        assert format_tab_table(["ID", "SERVICE", "STATE"], []) == "ID  SERVICE  STATE"

    def test_widest_cell_sets_width(self):
        table = format_tab_table(["ID", "STATE"], [["abcdef", "ready"], ["x", "installing"]])

        assert table.splitlines() == [
            "ID      STATE",
            "abcdef  ready",
            "x       installing",
        ]

    def test_last_column_not_padded(self):
        table = format_tab_table(["A", "B"], [["1", "2"]])

        assert not any(line.endswith(" ") for line in table.splitlines())

    def test_custom_padding(self):
        assert format_tab_table(["A", "B"], [], padding=4) == "A    B"


class TestEnableDebug:
    def test_app_loggers_debug(self):
        saved = {name: (logging.getLogger(name).level, list(logging.getLogger(name).handlers)) for name in APP_LOGGERS}
        try:
            enable_debug()

            for name in APP_LOGGERS:
                assert logging.getLogger(name).level == logging.DEBUG
        finally:
            for name, (level, handlers) in saved.items():
                app_logger = logging.getLogger(name)
                app_logger.setLevel(level)
                app_logger.handlers = handlers
                app_logger.propagate = True
            logging.getLogger("rosa").setLevel(logging.INFO)
