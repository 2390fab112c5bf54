# games/shinobi/content/items.py
ITEMS = {
    # Heal
    "item_heal_1": {
        "name": "Soldier Pill",
        "description": "Restores 50 HP.",
        "type": "heal",
        "price": 30,
        "value": 50,
        "effects": [{"type": "restore", "resource": "hp"}],
    },
    "item_chakra_1": {
        "name": "Chakra Vial",
        "description": "Restores 40 chakra.",
        "type": "heal",
        "price": 25,
        "value": 40,
        "effects": [{"type": "restore", "resource": "chakra"}],
    },
    # Damage
    "item_dmg_1": {
        "name": "Explosive Tag",
        "description": "Deals 60 damage that ignores defenses.",
        "type": "damage",
        "price": 40,
        "value": 60,
        "effects": [{"type": "damage"}],
    },
    # Debuff
    "item_poison_kunai": {
        "name": "Poison Kunai",
        "description": "Deals 20 damage and poisons the enemy for 3 turns.",
        "type": "debuff",
        "price": 55,
        "value": 20,
        "effects": [
            {"type": "damage"},
            {"type": "burn", "ticks": 3, "stack": True, "log": "The enemy is poisoned!"},
        ],
    },
    "item_flash_bomb": {
        "name": "Flash Bomb",
        "description": "Blinds the enemy for 1 turn.",
        "type": "debuff",
        "price": 70,
        "value": 1,
        "effects": [
            {"type": "stun", "chance": 1.0, "log": "The enemy is blinded and cannot act!"},
        ],
    },
    # Special
    "item_cursed_pill": {
        "name": "Berserker Tonic",
        "description": "+50% attack, but costs 40 HP.",
        "type": "special",
        "price": 90,
        "value": 1.5,
        "self_damage": 40,
        "effects": [
            {"type": "self_damage"},
            {"type": "set_buff", "buff": "attack_mult", "log": "Berserk! Attack surges, but the body pays for it."},
        ],
    },
    "item_special_1": {
        "name": "Hero Water",
        "description": "Restores 100 chakra, but costs 20 HP.",
        "type": "special",
        "price": 80,
        "value": 100,
        "self_damage": 20,
        "effects": [
            {"type": "restore", "resource": "chakra"},
            {"type": "self_damage", "log": "Chakra surges, but the body takes damage."},
        ],
    },
    "item_upgrade_pill": {
        "name": "Ascension Pill",
        "description": "Breaks through your limits: gain a level on the spot.",
        "type": "special",
        "price": 999,
        "value": 1,
        "effects": [{"type": "level_up"}],
    },
}
