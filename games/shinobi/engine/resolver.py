# games/shinobi/engine/resolver.py
import random
from typing import Dict, Any, Optional

from .models import EnemyState, PlayerState, REJECTED, END_TURN, VICTORY, LEVELED_UP
from .dice import chance
from .rules import scaled_damage, crit_damage
from .effects import (
    apply_item_effects,
    apply_skill_effects,
    cooldown_remaining,
    set_cooldown,
)
from .progression import apply_level_up
from ..content.characters import CHARACTERS
from ..content.items import ITEMS
from ..content.skills import SKILLS


def rejected(reason: str, log: str) -> Dict[str, Any]:
    return {"signal": REJECTED, "reason": reason, "log": log, "damage": 0}


def owns_skill(ps: PlayerState, skill_id: str) -> bool:
    return skill_id in CHARACTERS.get(ps.character_id, {}).get("skills", [])


def skill_level(ps: PlayerState, skill_id: str) -> int:
    return int(ps.skills.get(skill_id, 0) or 0)


def skill_status(ps: PlayerState, skill_id: str) -> str:
    """What a skill button shows: locked, cooldown, no_chakra or ready."""
    skill = SKILLS.get(skill_id)
    if not skill or not owns_skill(ps, skill_id) or skill_level(ps, skill_id) <= 0:
        return "locked"
    if cooldown_remaining(ps, skill_id) > 0:
        return "cooldown"
    if ps.chakra < int(skill.get("cost", 0)):
        return "no_chakra"
    return "ready"


def validate_skill(ps: PlayerState, skill_id: str) -> Optional[Dict[str, Any]]:
    skill = SKILLS.get(skill_id)
    if not skill or not owns_skill(ps, skill_id):
        return rejected("unknown_skill", f"Unknown skill '{skill_id}'.")
    if skill_level(ps, skill_id) <= 0:
        return rejected("skill_locked", f"{skill['name']} has not been learned yet.")
    remaining = cooldown_remaining(ps, skill_id)
    if remaining > 0:
        return rejected("on_cooldown", f"{skill['name']} is on cooldown ({remaining} turns).")
    if ps.chakra < int(skill.get("cost", 0)):
        return rejected("not_enough_chakra", "Not enough chakra!")
    return None


def validate_item(ps: PlayerState, item_id: str) -> Optional[Dict[str, Any]]:
    item = ITEMS.get(item_id)
    if not item:
        return rejected("unknown_item", f"Unknown item '{item_id}'.")
    if int(ps.inventory.get(item_id, 0) or 0) <= 0:
        return rejected("item_missing", f"No {item['name']} left in the pouch.")
    return None


def skill_cue(skill_id: str) -> Optional[str]:
    return SKILLS.get(skill_id, {}).get("cinematic")


def use_skill(ps: PlayerState, enemy: EnemyState, skill_id: str, r: random.Random) -> Dict[str, Any]:
    """
    Resolve one skill use. Validates first; on success mutates the player and
    enemy in place and returns {"signal", "log", "damage", "crit", "healing", ...}.
    """
    failure = validate_skill(ps, skill_id)
    if failure:
        return failure

    skill = SKILLS[skill_id]
    level = skill_level(ps, skill_id)
    ps.chakra -= int(skill.get("cost", 0))

    damage = 0
    did_crit = False
    log_parts = []

    if skill.get("type") == "defense":
        log_parts.append(f"Uses {skill['name']}!")
        healing = apply_skill_effects(ps, enemy, skill, level, 0, r, log_parts)
    else:
        damage = scaled_damage(int(skill.get("damage", 0)), level, ps.buffs.attack_mult)
        if skill.get("always_crit"):
            did_crit = True
        elif skill.get("crit_chance"):
            did_crit = chance(float(skill["crit_chance"]), r)
        if did_crit:
            damage = crit_damage(damage)
            log_parts.append(f"Critical hit! {skill['name']} deals {damage} damage!")
        else:
            log_parts.append(f"{skill['name']} deals {damage} damage.")
        healing = apply_skill_effects(ps, enemy, skill, level, damage, r, log_parts)

    set_cooldown(ps, skill_id, skill)
    enemy.hp -= damage

    return {
        "signal": VICTORY if enemy.hp <= 0 else END_TURN,
        "log": " ".join(log_parts),
        "damage": damage,
        "crit": did_crit,
        "healing": healing,
        "skill_id": skill_id,
        "cue": skill.get("cinematic"),
    }


def use_item(ps: PlayerState, enemy: EnemyState, item_id: str, r: random.Random) -> Dict[str, Any]:
    """
    Resolve one item use. The upgrade pill levels the player up on the spot and
    returns LEVELED_UP without touching the enemy or ending the turn.
    """
    failure = validate_item(ps, item_id)
    if failure:
        return failure

    item = ITEMS[item_id]
    ps.inventory[item_id] -= 1
    if ps.inventory[item_id] <= 0:
        del ps.inventory[item_id]

    log_parts = [f"Uses {item['name']}:"]

    if any(entry.get("type") == "level_up" for entry in item.get("effects", [])):
        apply_level_up(ps, carry_xp=False)
        log_parts.append(f"Breakthrough! Now level {ps.level}, fully restored.")
        return {"signal": LEVELED_UP, "log": " ".join(log_parts), "damage": 0, "item_id": item_id}

    damage = apply_item_effects(ps, enemy, item, r, log_parts)
    return {
        "signal": VICTORY if enemy.hp <= 0 else END_TURN,
        "log": " ".join(log_parts),
        "damage": damage,
        "item_id": item_id,
    }
