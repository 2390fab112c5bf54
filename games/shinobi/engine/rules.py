# games/shinobi/engine/rules.py
import math

from ..content.balance import DEFAULTS, ENEMY, REWARDS


def clamp(x: int, lo: int, hi: int) -> int:
    return max(lo, min(hi, x))


def skill_multiplier(level: int) -> float:
    return 1 + level * DEFAULTS["skill_level_bonus"]


def scaled_damage(base: int, level: int, attack_mult: float = 0) -> int:
    raw = math.floor(base * skill_multiplier(level))
    if attack_mult:
        raw = math.floor(raw * attack_mult)
    return raw


def crit_damage(raw: int) -> int:
    return math.floor(raw * DEFAULTS["crit_multiplier"])


def enemy_attack_roll(attack: int, roll: float) -> int:
    # roll is a uniform draw in [0, 1): +/-20% around the attack value
    return math.floor(attack * (ENEMY["variance_min"] + roll * ENEMY["variance_spread"]))


def burn_tick(hp_max: int) -> int:
    return math.floor(hp_max * ENEMY["burn_pct"])


def gold_reward(level: int, roll: float) -> int:
    return math.floor(REWARDS["gold_base"] + level * REWARDS["gold_per_level"] + roll * REWARDS["gold_spread"])


def xp_reward(enemy_hp_max: int) -> int:
    return math.floor(enemy_hp_max / REWARDS["xp_hp_divisor"])


def grow(value: int, factor: float) -> int:
    return math.floor(value * factor)
