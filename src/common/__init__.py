"""
ロト番号ジェネレーター - 共通設定

プリセットゲームの抽選条件を定義する。
"""

# プリセットゲームの抽選条件
# pick_size: 選択数, range_max: 数字の最大値（1〜range_max）
# bonus_*: 第2プール（存在しないゲームは0）
GAME_CONFIG: dict[str, dict] = {
    "LOTTO": {
        "name": "Lotto 6aus49",
        "pick_size": 6,
        "range_max": 49,
        "bonus_pick_size": 0,
        "bonus_range_max": 0,
    },
    "EUROJACKPOT": {
        "name": "Eurojackpot",
        "pick_size": 5,
        "range_max": 50,
        "bonus_pick_size": 2,
        "bonus_range_max": 12,
    },
}

DEFAULT_GAME = "EUROJACKPOT"

# CLIで選択可能なゲーム（"custom" は引数で条件を指定）
GAME_CHOICES = ["lotto", "eurojackpot", "custom"]
