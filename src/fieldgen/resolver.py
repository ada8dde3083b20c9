"""
ロト番号ジェネレーター - ゲーム設定の解決

選択されたゲーム（プリセット or カスタム）を
抽選プール設定（Pool のタプル）に変換する。
"""

from dataclasses import dataclass
from typing import Optional, Union

import numpy as np

from src.common import GAME_CONFIG

# 抽選エンジン（numpy）が扱えるプールサイズの上限
MAX_POOL_SIZE = int(np.iinfo(np.int64).max)


class MissingParameterError(ValueError):
    """カスタムゲームの必須パラメータが指定されていない"""

    def __init__(self, message: str, parameter: str) -> None:
        super().__init__(message)
        self.parameter = parameter


class InvalidPoolError(ValueError):
    """選択数・プールサイズの組み合わせが不正"""


@dataclass(frozen=True)
class Pool:
    """
    1つの抽選プール。

    Attributes:
        pick_size: 選択数（numbercount）
        range_max: プールサイズ。数字は 1〜range_max から選ばれる
    """

    pick_size: int
    range_max: int


@dataclass(frozen=True)
class PresetGame:
    """GAME_CONFIG に定義済みのゲーム"""

    game_key: str


@dataclass(frozen=True)
class CustomGame:
    """ユーザー指定の抽選条件によるゲーム"""

    numbercount_a: Optional[int] = None
    poolsize_a: Optional[int] = None
    numbercount_b: Optional[int] = None
    poolsize_b: Optional[int] = None


GameSelection = Union[PresetGame, CustomGame]


def validate_pool(pool: Pool) -> None:
    """
    0 < pick_size <= range_max <= MAX_POOL_SIZE を満たさない場合 InvalidPoolError を送出する。
    """
    if pool.pick_size < 1 or pool.range_max < 1:
        raise InvalidPoolError(
            f"不正なプール設定: 選択数とプールサイズは1以上 "
            f"(numbercount={pool.pick_size}, poolsize={pool.range_max})"
        )
    if pool.pick_size > pool.range_max:
        raise InvalidPoolError(
            f"不正なプール設定: 選択数がプールサイズを超えています "
            f"(numbercount={pool.pick_size}, poolsize={pool.range_max})"
        )
    if pool.range_max > MAX_POOL_SIZE:
        raise InvalidPoolError(
            f"不正なプール設定: プールサイズは{MAX_POOL_SIZE}以下 (poolsize={pool.range_max})"
        )


def _secondary(pick_size: Optional[int], range_max: Optional[int]) -> tuple[Pool, ...]:
    # 第2プールは両方が正の値のときのみ有効
    if pick_size is not None and range_max is not None and pick_size > 0 and range_max > 0:
        return (Pool(pick_size, range_max),)
    return ()


def resolve_preset(game_key: str) -> tuple[Pool, ...]:
    """プリセットゲームのプール設定を返す"""
    game_key = game_key.upper()
    if game_key not in GAME_CONFIG:
        raise ValueError(f"不正なゲームキー: '{game_key}' (有効: {', '.join(GAME_CONFIG.keys())})")

    config = GAME_CONFIG[game_key]
    primary = Pool(config["pick_size"], config["range_max"])
    return (primary,) + _secondary(config["bonus_pick_size"], config["bonus_range_max"])


def resolve_custom(game: CustomGame) -> tuple[Pool, ...]:
    """
    カスタムゲームのプール設定を返す。

    数値の範囲チェックは行わない（抽選時に validate_pool で検証される）。
    poolsize_b のみ指定された場合は第2プールなしとして扱う。

    Raises:
        MissingParameterError: numbercount_a / poolsize_a が未指定、
            または numbercount_b のみ指定で poolsize_b が未指定
    """
    if game.numbercount_a is None or game.poolsize_a is None:
        missing = "numbercount_a" if game.numbercount_a is None else "poolsize_a"
        raise MissingParameterError("numbercount_a と poolsize_a を指定してください", missing)

    primary = Pool(game.numbercount_a, game.poolsize_a)

    if game.numbercount_b is None:
        return (primary,)

    if game.poolsize_b is None:
        raise MissingParameterError(
            "numbercount_b を指定した場合は poolsize_b も指定してください", "poolsize_b"
        )

    return (primary,) + _secondary(game.numbercount_b, game.poolsize_b)


def resolve_game(selection: GameSelection) -> tuple[Pool, ...]:
    """
    ゲーム選択を抽選プール設定に変換する。

    Args:
        selection: PresetGame または CustomGame

    Returns:
        1つまたは2つの Pool のタプル
    """
    if isinstance(selection, CustomGame):
        return resolve_custom(selection)
    return resolve_preset(selection.game_key)
