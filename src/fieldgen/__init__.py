"""
ロト番号ジェネレーター

プリセット（Lotto / Eurojackpot）またはカスタム条件で
ランダムなロト番号を生成する。

使用方法:
    python -m src.fieldgen [--game lotto|eurojackpot|custom] [--fieldcount N]
"""

from src.fieldgen.resolver import (
    CustomGame,
    InvalidPoolError,
    MissingParameterError,
    Pool,
    PresetGame,
    resolve_game,
    validate_pool,
)
from src.fieldgen.sampler import FieldGenerator, draw_field
from src.fieldgen.printer import format_field, format_row, print_fields

__all__ = [
    "CustomGame",
    "InvalidPoolError",
    "MissingParameterError",
    "Pool",
    "PresetGame",
    "resolve_game",
    "validate_pool",
    "FieldGenerator",
    "draw_field",
    "format_field",
    "format_row",
    "print_fields",
]
