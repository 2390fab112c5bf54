# games/shinobi/content/balance.py
DEFAULTS = {
    "xp_max": 100,
    "starting_gold": 0,
    "starting_inventory": {"item_heal_1": 1},
    "skill_level_bonus": 0.1,
    "crit_multiplier": 1.5,
}

GROWTH = {
    "xp": 1.2,
    "hp": 1.1,
    "chakra": 1.1,
    "shop_every_levels": 3,
}

REWARDS = {
    "gold_base": 20,
    "gold_per_level": 5,
    "gold_spread": 10,
    "xp_hp_divisor": 2,
    "regen_hp_pct": 0.1,
    "regen_chakra_pct": 0.2,
    # cumulative thresholds on one draw; only rolled above level 1
    "branches": ((0.3, "shop"), (0.6, "event"), (1.0, "battle")),
}

ENEMY = {
    "variance_min": 0.8,
    "variance_spread": 0.4,
    "burn_pct": 0.05,
    "attack_down_mult": 0.7,
    "absolute_block": 100,
    "dummy_hp_base": 50,
    "dummy_hp_per_level": 10,
    "dummy_attack_base": 5,
    "dummy_attack_per_level": 1,
    "roster_scale_per_level": 0.1,
}

CAPS = {
    "item_self_damage_floor": 1,
    "event_damage_floor": 1,
}
