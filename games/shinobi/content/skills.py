# games/shinobi/content/skills.py
SKILLS = {
    # Naruto
    "n_1": {
        "name": "Uzumaki Barrage",
        "description": "A quick flurry of blows from a crowd of clones.",
        "damage": 15,
        "cost": 0,
        "type": "attack",
        "cooldown": 0,
        "particle": "hit",
        "effects": [],
    },
    "n_2": {
        "name": "Rasengan",
        "description": "High single-target damage.",
        "damage": 40,
        "cost": 20,
        "type": "attack",
        "cooldown": 2,
        "particle": "wind",
        "effects": [],
    },
    "n_3": {
        "name": "Multi Shadow Clone Jutsu",
        "description": "Clones confuse the enemy: 30% evasion for the rest of the fight.",
        "damage": 20,
        "cost": 15,
        "type": "defense",
        "cooldown": 4,
        "particle": "smoke",
        "effects": [
            {"type": "set_buff", "buff": "evasion", "value": 30, "log": "Evasion rises to 30%."},
        ],
    },
    "n_4": {
        "name": "Sage Mode",
        "description": "Gathers natural energy to heal and empower attacks.",
        "damage": 0,
        "cost": 40,
        "type": "defense",
        "cooldown": 5,
        "particle": "chakra",
        "effects": [
            {"type": "heal_pct", "value": 0.3},
            {"type": "set_buff", "buff": "attack_mult", "value": 1.2, "log": "Attack power rises."},
        ],
    },
    "n_5": {
        "name": "Sage Art: Super Tailed Beast Rasenshuriken",
        "description": "Ultimate: devastating damage, drains 50% of it as life.",
        "damage": 100,
        "cost": 70,
        "type": "ultimate",
        "cooldown": 6,
        "cinematic": "rasenshuriken",
        "particle": "wind",
        "effects": [
            {"type": "lifesteal", "fraction": 0.5},
        ],
    },
    "n_6": {
        "name": "Reverse Harem Jutsu",
        "description": "A mental blow with a very high chance to stun.",
        "damage": 10,
        "cost": 25,
        "type": "attack",
        "cooldown": 5,
        "particle": "heart",
        "effects": [
            {"type": "stun", "chance": 0.9, "log": "The enemy is dumbstruck and cannot move!"},
        ],
    },
    "n_7": {
        "name": "Tailed Beast Bomb",
        "description": "Unleashes the Nine-Tails' chakra in one massive blast.",
        "damage": 85,
        "cost": 60,
        "type": "attack",
        "cooldown": 5,
        "cinematic": "tailed_beast",
        "particle": "explosion",
        "effects": [],
    },
    # Sasuke
    "s_1": {
        "name": "Lion Combo",
        "description": "Taijutsu combo with a high critical rate.",
        "damage": 20,
        "cost": 5,
        "type": "attack",
        "cooldown": 0,
        "particle": "hit",
        "crit_chance": 0.5,
        "effects": [],
    },
    "s_2": {
        "name": "Fire Style: Great Fireball",
        "description": "Sets the enemy on fire for 3 turns.",
        "damage": 30,
        "cost": 15,
        "type": "attack",
        "cooldown": 2,
        "cinematic": "fireball",
        "particle": "fire",
        "effects": [
            {"type": "burn", "ticks": 3, "log": "The enemy catches fire!"},
        ],
    },
    "s_3": {
        "name": "Chidori",
        "description": "Lightning thrust with a 30% chance to paralyze.",
        "damage": 45,
        "cost": 30,
        "type": "attack",
        "cooldown": 3,
        "cinematic": "chidori",
        "particle": "lightning",
        "effects": [
            {"type": "stun", "chance": 0.3, "log": "The enemy is paralyzed!"},
        ],
    },
    "s_4": {
        "name": "Susanoo: Ribcage",
        "description": "A spectral shield that cancels the next hit.",
        "damage": 10,
        "cost": 30,
        "type": "defense",
        "cooldown": 4,
        "particle": "chakra",
        "effects": [
            {"type": "set_buff", "buff": "defense", "value": 1000, "log": "Susanoo blocks the next attack completely."},
        ],
    },
    "s_5": {
        "name": "Indra's Arrow",
        "description": "Ultimate: a killing shot that always lands critically.",
        "damage": 120,
        "cost": 75,
        "type": "ultimate",
        "cooldown": 6,
        "cinematic": "indra",
        "particle": "lightning",
        "always_crit": True,
        "effects": [],
    },
    "s_6": {
        "name": "Amaterasu",
        "description": "Black flames that burn for 5 turns.",
        "damage": 40,
        "cost": 45,
        "type": "attack",
        "cooldown": 5,
        "cinematic": "amaterasu",
        "particle": "void",
        "effects": [
            {"type": "burn", "ticks": 5, "log": "The black flames keep burning!"},
        ],
    },
    "s_7": {
        "name": "Lightning Style: Kirin",
        "description": "Calls down natural lightning for devastating damage.",
        "damage": 90,
        "cost": 65,
        "type": "attack",
        "cooldown": 6,
        "cinematic": "kirin",
        "particle": "lightning",
        "effects": [],
    },
    # Kakashi
    "k_1": {
        "name": "Kunai Tactics",
        "description": "Cheap, fast kunai throw.",
        "damage": 15,
        "cost": 0,
        "type": "attack",
        "cooldown": 0,
        "particle": "shuriken",
        "effects": [],
    },
    "k_2": {
        "name": "Earth Style: Mud Wall",
        "description": "Halves the next hit taken.",
        "damage": 0,
        "cost": 15,
        "type": "defense",
        "cooldown": 3,
        "particle": "smoke",
        "effects": [
            {"type": "set_buff", "buff": "defense", "value": 0.5, "log": "A mud wall rises. Incoming damage is halved."},
        ],
    },
    "k_3": {
        "name": "Lightning Blade",
        "description": "A piercing strike of focused lightning.",
        "damage": 45,
        "cost": 25,
        "type": "attack",
        "cooldown": 3,
        "cinematic": "chidori",
        "particle": "lightning",
        "effects": [],
    },
    "k_4": {
        "name": "Water Style: Water Dragon",
        "description": "Lowers enemy attack for 2 turns.",
        "damage": 35,
        "cost": 20,
        "type": "attack",
        "cooldown": 3,
        "cinematic": "water_dragon",
        "particle": "wind",
        "effects": [
            {"type": "attack_down", "ticks": 2, "log": "The enemy's attack drops!"},
        ],
    },
    "k_5": {
        "name": "Double Kamui Lightning Blade",
        "description": "Ultimate: massive damage, then phase out of the next attack.",
        "damage": 95,
        "cost": 80,
        "type": "ultimate",
        "cooldown": 6,
        "cinematic": "kamui",
        "particle": "chakra",
        "effects": [
            {"type": "invulnerable", "log": "(slips into the Kamui dimension)"},
        ],
    },
    "k_6": {
        "name": "Summoning: Ninken",
        "description": "Pakkun and the pack pin the enemy down. Always stuns.",
        "damage": 25,
        "cost": 35,
        "type": "attack",
        "cooldown": 5,
        "cinematic": "ninken",
        "particle": "smoke",
        "effects": [
            {"type": "stun", "chance": 1.0, "log": "The hounds hold the enemy in place!"},
        ],
    },
    "k_7": {
        "name": "Lightning Style: Purple Electricity",
        "description": "A focused thrust developed after losing the Sharingan.",
        "damage": 75,
        "cost": 50,
        "type": "attack",
        "cooldown": 4,
        "cinematic": "chidori",
        "particle": "lightning",
        "effects": [],
    },
}
