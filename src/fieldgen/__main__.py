"""
ロト番号ジェネレーター CLIエントリーポイント

使用方法:
    python -m src.fieldgen [オプション] [numbercount_a poolsize_a [numbercount_b poolsize_b]]

実行例:
    # Eurojackpot（デフォルト）を1行
    python -m src.fieldgen

    # Lotto 6aus49 を5行、行番号なし
    python -m src.fieldgen --game lotto --fieldcount 5 --noindexprint

    # カスタム: 3/10 + 1/5
    python -m src.fieldgen --game custom 3 10 1 5
    python -m src.fieldgen --game custom --numbercount_a 3 --poolsize_a 10
"""

import argparse
import sys
from typing import Optional, Sequence

from src.common import DEFAULT_GAME, GAME_CHOICES
from src.fieldgen.printer import print_error, print_fields, supports_color
from src.fieldgen.resolver import CustomGame, GameSelection, PresetGame, resolve_game
from src.fieldgen.sampler import FieldGenerator

_CUSTOM_PARAMS = ["numbercount_a", "poolsize_a", "numbercount_b", "poolsize_b"]

_CUSTOM_HELP = {
    "numbercount_a": "選択数（customのみ）",
    "poolsize_a": "プールサイズ（customのみ）",
    "numbercount_b": "第2選択数（customのみ）",
    "poolsize_b": "第2プールサイズ（customのみ）",
}


def _non_negative_int(value: str) -> int:
    try:
        n = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"整数を指定してください: '{value}'")
    if n < 0:
        raise argparse.ArgumentTypeError(f"0以上を指定してください: {n}")
    return n


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="python -m src.fieldgen",
        description="ロト番号ジェネレーター（Lotto / Eurojackpot / カスタム）",
    )
    parser.add_argument(
        "-f",
        "--fieldcount",
        type=_non_negative_int,
        default=1,
        help="生成する行数（デフォルト: 1）",
    )
    parser.add_argument(
        "-g",
        "--game",
        type=str,
        default=DEFAULT_GAME.lower(),
        choices=GAME_CHOICES,
        help=f"対象ゲーム（デフォルト: {DEFAULT_GAME.lower()}）",
    )
    for name in _CUSTOM_PARAMS:
        parser.add_argument(name, type=int, nargs="?", default=None, help=_CUSTOM_HELP[name])
    for name in _CUSTOM_PARAMS:
        parser.add_argument(
            f"--{name}",
            dest=f"{name}_opt",
            type=int,
            default=None,
            metavar=name.upper(),
            help=f"{_CUSTOM_HELP[name]}。位置引数より優先",
        )
    parser.add_argument(
        "-n",
        "--noindexprint",
        action="store_true",
        help="行番号を表示しない（fieldcount > 1 の場合）",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="乱数シード（再現性のある出力用）",
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="色付けせずにプレーンテキストで出力",
    )
    return parser


def _selection_from_args(args: argparse.Namespace) -> GameSelection:
    """コマンドライン引数からゲーム選択を組み立てる"""
    if args.game != "custom":
        return PresetGame(args.game.upper())

    positional = [getattr(args, name) for name in _CUSTOM_PARAMS]
    named = [getattr(args, f"{name}_opt") for name in _CUSTOM_PARAMS]

    # 第1プールが両方名前付きで指定された場合、位置引数は第2プールとして扱う
    if named[0] is not None and named[1] is not None:
        positional = [None, None] + positional[:2]

    values = {}
    for name, pos, opt in zip(_CUSTOM_PARAMS, positional, named):
        values[name] = opt if opt is not None else pos
    return CustomGame(**values)


def main(argv: Optional[Sequence[str]] = None) -> None:
    """メイン処理"""
    parser = _build_parser()
    args = parser.parse_args(argv)
    color = False if args.no_color else supports_color(sys.stdout)

    # 1. プール設定の解決（ValueError: 引数不足・不正なプール設定）
    try:
        pools = resolve_game(_selection_from_args(args))
        generator = FieldGenerator(pools, seed=args.seed)
    except ValueError as e:
        print_error(str(e), stream=sys.stderr, color=False if args.no_color else None)
        parser.print_help(sys.stderr)
        sys.exit(1)

    # 2. 抽選と出力
    print_fields(generator, args.fieldcount, suppress_index=args.noindexprint, color=color)


if __name__ == "__main__":
    main()
