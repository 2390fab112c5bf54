# games/shinobi/engine/effects.py
from __future__ import annotations

import math
import random
from typing import Any, Dict, List

from .dice import chance
from .models import EnemyState, PlayerState
from .rules import clamp, skill_multiplier
from ..content.balance import CAPS

BUFF_NAMES = ("invulnerable", "evasion", "defense", "attack_mult")


# Cooldowns

def set_cooldown(ps: PlayerState, skill_id: str, skill: Dict[str, Any]) -> None:
    cooldown = int(skill.get("cooldown", 0) or 0)
    if cooldown <= 0:
        return
    ps.cooldowns[skill_id] = cooldown


def cooldown_remaining(ps: PlayerState, skill_id: str) -> int:
    return int(ps.cooldowns.get(skill_id, 0) or 0)


def tick_cooldowns(ps: PlayerState) -> None:
    """Start-of-player-turn tick: every counter drops by one, spent entries go away."""
    updated = {}
    for skill_id, remaining in ps.cooldowns.items():
        remaining_turns = int(remaining) - 1
        if remaining_turns > 0:
            updated[skill_id] = remaining_turns
    ps.cooldowns = updated


def clear_combat_buffs(ps: PlayerState) -> None:
    """Encounter won: buffs and cooldowns do not carry into the next fight."""
    ps.buffs.clear()
    ps.cooldowns = {}


# Player resources

def heal(ps: PlayerState, amount: int) -> int:
    before = ps.hp
    ps.hp = clamp(ps.hp + max(0, amount), 0, ps.hp_max)
    return ps.hp - before


def restore_chakra(ps: PlayerState, amount: int) -> int:
    before = ps.chakra
    ps.chakra = clamp(ps.chakra + max(0, amount), 0, ps.chakra_max)
    return ps.chakra - before


def apply_self_damage(ps: PlayerState, amount: int, floor: int = CAPS["item_self_damage_floor"]) -> int:
    # self-inflicted costs never knock the player out
    before = ps.hp
    ps.hp = max(floor, ps.hp - max(0, amount))
    return before - ps.hp


def set_buff(ps: PlayerState, name: str, value: Any) -> None:
    if name not in BUFF_NAMES:
        raise ValueError(f"unknown buff '{name}'")
    if name == "invulnerable":
        value = bool(value)
    setattr(ps.buffs, name, value)


# Enemy status effects

def apply_burn(enemy: EnemyState, ticks: int, stack: bool = False) -> None:
    if stack:
        enemy.status.burn = int(enemy.status.burn or 0) + int(ticks)
    else:
        enemy.status.burn = int(ticks)


def apply_stun(enemy: EnemyState) -> None:
    enemy.status.stun = True


def apply_attack_down(enemy: EnemyState, ticks: int) -> None:
    enemy.status.attack_down = int(ticks)


def reset_status(enemy: EnemyState) -> None:
    enemy.status.burn = 0
    enemy.status.stun = False
    enemy.status.attack_down = 0


# Descriptor interpreter

def apply_skill_effects(
    ps: PlayerState,
    enemy: EnemyState,
    skill: Dict[str, Any],
    level: int,
    damage: int,
    r: random.Random,
    log_parts: List[str],
) -> int:
    """
    Run a skill's effect descriptors after damage has been computed.
    Returns HP healed on the player.
    """
    healed = 0
    for entry in skill.get("effects", []) or []:
        etype = entry.get("type")
        if etype == "set_buff":
            set_buff(ps, entry["buff"], entry.get("value"))
        elif etype == "heal_pct":
            amount = math.floor(ps.hp_max * float(entry.get("value", 0)) * skill_multiplier(level))
            healed += heal(ps, amount)
            log_parts.append(f"Restores {amount} HP.")
        elif etype == "burn":
            apply_burn(enemy, int(entry.get("ticks", 0)), stack=bool(entry.get("stack")))
        elif etype == "stun":
            if not chance(float(entry.get("chance", 1.0)), r):
                continue
            apply_stun(enemy)
        elif etype == "attack_down":
            apply_attack_down(enemy, int(entry.get("ticks", 0)))
        elif etype == "lifesteal":
            amount = math.floor(damage * float(entry.get("fraction", 0)))
            healed += heal(ps, amount)
            log_parts.append(f"(drains {amount} HP)")
            continue
        elif etype == "invulnerable":
            set_buff(ps, "invulnerable", True)
        else:
            raise ValueError(f"unknown skill effect '{etype}'")
        if entry.get("log"):
            log_parts.append(entry["log"])
    return healed


def apply_item_effects(
    ps: PlayerState,
    enemy: EnemyState,
    item: Dict[str, Any],
    r: random.Random,
    log_parts: List[str],
) -> int:
    """
    Run an item's effect descriptors (everything except level_up, which the
    resolver handles as its own transition). Returns damage dealt to the enemy.
    """
    value = item.get("value", 0)
    damage = 0
    for entry in item.get("effects", []) or []:
        etype = entry.get("type")
        if etype == "restore":
            amount = int(entry.get("value", value))
            if entry.get("resource") == "chakra":
                restore_chakra(ps, amount)
                log_parts.append(f"Restores {amount} chakra.")
            else:
                heal(ps, amount)
                log_parts.append(f"Restores {amount} HP.")
        elif etype == "damage":
            amount = int(entry.get("value", value))
            enemy.hp -= amount
            damage += amount
            log_parts.append(f"Deals {amount} damage.")
        elif etype == "burn":
            apply_burn(enemy, int(entry.get("ticks", 0)), stack=bool(entry.get("stack")))
        elif etype == "stun":
            if not chance(float(entry.get("chance", 1.0)), r):
                continue
            apply_stun(enemy)
        elif etype == "self_damage":
            apply_self_damage(ps, int(entry.get("value", item.get("self_damage", 0))))
        elif etype == "set_buff":
            set_buff(ps, entry["buff"], entry.get("value", value))
        else:
            raise ValueError(f"unknown item effect '{etype}'")
        if entry.get("log"):
            log_parts.append(entry["log"])
    return damage
