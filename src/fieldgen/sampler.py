"""
ロト番号ジェネレーター - 抽選エンジン

各プールから非重複の数字を一様ランダムに抽選する。
"""

from typing import Iterator, Optional, Sequence

import numpy as np

from src.fieldgen.resolver import Pool, validate_pool


def draw_field(pool: Pool, rng: np.random.Generator) -> tuple[int, ...]:
    """
    1つのプールから非重複の数字セットを抽選する。

    0〜range_max-1 から pick_size 個を非復元抽出し（全ての組み合わせが等確率）、
    昇順ソート後に +1 して 1〜range_max の範囲に変換する。

    Args:
        pool: 抽選プール
        rng: 乱数生成器

    Returns:
        昇順ソート済みの数字タプル

    Raises:
        InvalidPoolError: 0 < pick_size <= range_max を満たさない場合
    """
    validate_pool(pool)
    sample = rng.choice(pool.range_max, size=pool.pick_size, replace=False)
    sample.sort()
    return tuple(int(n) + 1 for n in sample)


class FieldGenerator:
    """
    プール設定に基づいてロト番号の行を生成するエンジン。

    1行は各プールにつき1つの数字セットからなる。
    各行は独立に抽選され、行をまたいだ状態は乱数生成器の内部状態のみ。

    使用例:
        >>> from src.fieldgen.resolver import PresetGame, resolve_game
        >>> gen = FieldGenerator(resolve_game(PresetGame("EUROJACKPOT")), seed=42)
        >>> rows = list(gen.run(3))
    """

    def __init__(
        self,
        pools: Sequence[Pool],
        rng: Optional[np.random.Generator] = None,
        seed: Optional[int] = None,
    ) -> None:
        """
        Args:
            pools: 1つまたは2つの Pool
            rng: 乱数生成器（省略時は seed から生成）
            seed: 再現性のための乱数シード（rng 指定時は無視）
        """
        if not 1 <= len(pools) <= 2:
            raise ValueError(f"プール数は1または2: {len(pools)}")
        for pool in pools:
            validate_pool(pool)

        self.pools: tuple[Pool, ...] = tuple(pools)
        self.rng = rng if rng is not None else np.random.default_rng(seed)

    def generate(self) -> tuple[tuple[int, ...], ...]:
        """1行分（プールごとの数字セット）を抽選する"""
        return tuple(draw_field(pool, self.rng) for pool in self.pools)

    def run(self, repeats: int) -> Iterator[tuple[tuple[int, ...], ...]]:
        """
        repeats 行を順に生成する。

        Args:
            repeats: 生成する行数（0以上）
        """
        if repeats < 0:
            raise ValueError(f"生成行数は0以上: {repeats}")
        for _ in range(repeats):
            yield self.generate()
