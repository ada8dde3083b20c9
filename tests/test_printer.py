"""
テスト - 出力整形
"""

import io

import pytest

from src.fieldgen.printer import (
    colorize,
    format_field,
    format_row,
    print_error,
    print_fields,
    supports_color,
)
from src.fieldgen.resolver import Pool
from src.fieldgen.sampler import FieldGenerator


class TestFormat:
    """format_field() / format_row() のテスト"""

    def test_format_field_trailing_space(self):
        """各数字の後に空白が付くこと"""
        assert format_field((3, 17, 42)) == "3 17 42 "

    def test_row_without_index(self):
        assert format_row(((1, 2), (3,))) == ["1 2 ", "3 "]

    def test_row_with_index(self):
        """第2プールの行は番号なしでタブ揃え"""
        assert format_row(((1, 2), (3,)), index=2) == ["2.\t1 2 ", "\t3 "]

    def test_row_with_color(self):
        lines = format_row(((1, 2),), index=1, color=True)
        assert lines == ["\033[33m1.\033[0m\t\033[32m1 2 \033[0m"]

    def test_colorize_disabled(self):
        assert colorize("abc", "red", enabled=False) == "abc"


class TestSupportsColor:
    """supports_color() のテスト"""

    class _Tty(io.StringIO):
        def isatty(self):
            return True

    def test_not_tty(self, monkeypatch):
        monkeypatch.delenv("NO_COLOR", raising=False)
        assert supports_color(io.StringIO()) is False

    def test_tty(self, monkeypatch):
        monkeypatch.delenv("NO_COLOR", raising=False)
        assert supports_color(self._Tty()) is True

    def test_no_color_env(self, monkeypatch):
        monkeypatch.setenv("NO_COLOR", "1")
        assert supports_color(self._Tty()) is False


class TestPrintFields:
    """print_fields() のテスト"""

    @pytest.fixture
    def eurojackpot(self) -> FieldGenerator:
        return FieldGenerator([Pool(5, 50), Pool(2, 12)], seed=3)

    def _lines(self, generator, fieldcount, **kwargs) -> list[str]:
        out = io.StringIO()
        print_fields(generator, fieldcount, stream=out, color=False, **kwargs)
        return out.getvalue().splitlines()

    def test_single_row_no_index(self, eurojackpot):
        """1行のみなら行番号を表示しない"""
        lines = self._lines(eurojackpot, 1)
        assert len(lines) == 2
        assert not lines[0].startswith("1.")
        assert not lines[1].startswith("\t")

    def test_indexed_rows(self, eurojackpot):
        """複数行なら1始まりの行番号を表示"""
        lines = self._lines(eurojackpot, 3)
        assert len(lines) == 6
        for i in range(3):
            assert lines[2 * i].startswith(f"{i + 1}.\t")
            assert lines[2 * i + 1].startswith("\t")
            assert len(lines[2 * i].split("\t")[1].split()) == 5
            assert len(lines[2 * i + 1].split()) == 2

    def test_suppress_index(self):
        gen = FieldGenerator([Pool(6, 49)], seed=3)
        lines = self._lines(gen, 4, suppress_index=True)
        assert len(lines) == 4
        assert all("\t" not in line and "." not in line for line in lines)

    def test_zero_rows(self, eurojackpot):
        assert self._lines(eurojackpot, 0) == []

    def test_matches_generator_output(self):
        """同じシードの generate() と一致すること"""
        expected = list(FieldGenerator([Pool(6, 49)], seed=9).run(2))
        lines = self._lines(FieldGenerator([Pool(6, 49)], seed=9), 2)
        assert lines == [f"{i}.\t{format_field(row[0])}" for i, row in enumerate(expected, 1)]


class TestPrintError:
    """print_error() のテスト"""

    def test_red_when_color(self):
        """色付け有効なら赤字"""
        out = io.StringIO()
        print_error("numbercount_a と poolsize_a を指定してください", stream=out, color=True)
        assert out.getvalue() == "\033[31m❌ エラー: numbercount_a と poolsize_a を指定してください\033[0m\n"

    def test_plain_without_color(self):
        out = io.StringIO()
        print_error("poolsize_b", stream=out, color=False)
        assert out.getvalue() == "❌ エラー: poolsize_b\n"

    def test_auto_detect_tty(self, monkeypatch):
        """color省略時は端末判定に従うこと"""
        monkeypatch.delenv("NO_COLOR", raising=False)
        out = TestSupportsColor._Tty()
        print_error("x", stream=out)
        assert out.getvalue().startswith("\033[31m")

    def test_default_stream_is_stderr(self, capsys):
        print_error("x", color=False)
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err == "❌ エラー: x\n"
