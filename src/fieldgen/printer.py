"""
ロト番号ジェネレーター - 出力整形

抽選結果をテキスト行に整形し、コンソールに出力する。
端末が色表示に対応しない場合はプレーンテキストになる。
"""

import os
import sys
from typing import Optional, TextIO

from src.fieldgen.sampler import FieldGenerator

# ANSI SGR カラーコード
_COLORS: dict[str, str] = {
    "red": "\033[31m",
    "green": "\033[32m",
    "yellow": "\033[33m",
}
_RESET = "\033[0m"


def supports_color(stream: TextIO) -> bool:
    """ストリームが色表示可能か（TTY かつ NO_COLOR 未設定）"""
    if os.environ.get("NO_COLOR"):
        return False
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())


def colorize(text: str, color: str, enabled: bool = True) -> str:
    if not enabled:
        return text
    return f"{_COLORS[color]}{text}{_RESET}"


def format_field(field: tuple[int, ...]) -> str:
    """数字セットを "1 2 3 " 形式（各数字の後に空白）に整形する"""
    return "".join(f"{n} " for n in field)


def format_row(
    row: tuple[tuple[int, ...], ...],
    index: Optional[int] = None,
    color: bool = False,
) -> list[str]:
    """
    1行分の抽選結果を出力行のリストに整形する。

    Args:
        row: プールごとの数字セット
        index: 行番号（1始まり）。None の場合は番号を表示しない
        color: 色付けするか

    Returns:
        出力する行（第2プールがあれば2行）
    """
    lines: list[str] = []
    for i, field in enumerate(row):
        prefix = ""
        if index is not None:
            # 第2プールの行は番号なしでタブ揃え
            prefix = colorize(f"{index}.", "yellow", color) + "\t" if i == 0 else "\t"
        lines.append(prefix + colorize(format_field(field), "green", color))
    return lines


def print_fields(
    generator: FieldGenerator,
    fieldcount: int,
    suppress_index: bool = False,
    stream: Optional[TextIO] = None,
    color: Optional[bool] = None,
) -> None:
    """
    fieldcount 行を生成して出力する。

    fieldcount が1の場合、または suppress_index が True の場合は行番号を表示しない。

    Args:
        generator: 抽選エンジン
        fieldcount: 生成行数
        suppress_index: 行番号を非表示にする
        stream: 出力先（省略時: 標準出力）
        color: 色付けするか（省略時: 端末に応じて自動判定）
    """
    stream = stream if stream is not None else sys.stdout
    if color is None:
        color = supports_color(stream)
    show_index = fieldcount != 1 and not suppress_index

    for i, row in enumerate(generator.run(fieldcount), 1):
        for line in format_row(row, i if show_index else None, color):
            print(line, file=stream)


def print_error(message: str, stream: Optional[TextIO] = None, color: Optional[bool] = None) -> None:
    """エラーメッセージを赤字で出力する（省略時: 標準エラー出力）"""
    stream = stream if stream is not None else sys.stderr
    if color is None:
        color = supports_color(stream)
    print(colorize(f"❌ エラー: {message}", "red", color), file=stream)
