# games/shinobi/engine/progression.py
from __future__ import annotations

import math
import random
from typing import Any, Dict

from .dice import pick_index, weighted_branch
from .effects import clear_combat_buffs, heal, restore_chakra, apply_self_damage
from .models import EnemyState, PlayerState, SHOP, PLAYING, PLAYER, ENEMY, OK, REJECTED
from .rules import gold_reward, grow, xp_reward
from ..content.balance import CAPS, GROWTH, REWARDS
from ..content.characters import CHARACTERS
from ..content.events import RANDOM_EVENTS
from ..content.items import ITEMS
from ..content.skills import SKILLS


def apply_level_up(ps: PlayerState, carry_xp: bool = True) -> None:
    """
    Raise the player one level and fully restore HP/chakra.
    carry_xp keeps the overflow past xp_max (victory path); otherwise xp resets.
    """
    ps.xp = ps.xp - ps.xp_max if carry_xp else 0
    ps.level += 1
    ps.xp_max = grow(ps.xp_max, GROWTH["xp"])
    ps.hp_max = grow(ps.hp_max, GROWTH["hp"])
    ps.hp = ps.hp_max
    ps.chakra_max = grow(ps.chakra_max, GROWTH["chakra"])
    ps.chakra = ps.chakra_max


def award_victory(ps: PlayerState, enemy: EnemyState, r: random.Random) -> Dict[str, Any]:
    """
    Rewards for a defeated enemy and the branch that follows.
    Returns {"next": "level_up" | "shop" | "event" | "battle", "gold", "xp", "event", "logs"}.
    """
    gold = gold_reward(ps.level, r.random())
    xp = xp_reward(enemy.hp_max)
    logs = [f"{enemy.name} is defeated!", f"Gained {gold} gold and {xp} XP."]

    ps.xp += xp
    ps.gold += gold

    if ps.xp >= ps.xp_max:
        apply_level_up(ps, carry_xp=True)
        clear_combat_buffs(ps)
        logs.append(f"Level up! You are now level {ps.level}.")
        return {"next": "level_up", "gold": gold, "xp": xp, "event": None, "logs": logs}

    heal(ps, math.floor(ps.hp_max * REWARDS["regen_hp_pct"]))
    restore_chakra(ps, math.floor(ps.chakra_max * REWARDS["regen_chakra_pct"]))
    clear_combat_buffs(ps)

    branch = "battle"
    if ps.level > 1:
        branch = weighted_branch(REWARDS["branches"], r)

    event = None
    if branch == "event":
        event = RANDOM_EVENTS[pick_index(len(RANDOM_EVENTS), r)]
    return {"next": branch, "gold": gold, "xp": xp, "event": event, "logs": logs}


def upgrade_skill(ps: PlayerState, skill_id: str) -> Dict[str, Any]:
    allowed = CHARACTERS.get(ps.character_id, {}).get("skills", [])
    if skill_id not in allowed:
        return {"signal": REJECTED, "reason": "unknown_skill", "log": f"Cannot train '{skill_id}'."}
    ps.skills[skill_id] = int(ps.skills.get(skill_id, 0) or 0) + 1
    level = ps.skills[skill_id]
    if level == 1:
        return {"signal": OK, "log": f"Learned {skill_name(skill_id)}!"}
    return {"signal": OK, "log": f"{skill_name(skill_id)} rises to level {level}."}


def route_after_upgrade(ps: PlayerState, enemy_alive: bool) -> Dict[str, Any]:
    """Where the level-up screen leads: forced shop every few levels, else back to the fight."""
    if ps.level % GROWTH["shop_every_levels"] == 0:
        return {"status": SHOP, "turn": None, "new_enemy": False}
    if enemy_alive:
        # the level-up interrupted a fight (upgrade pill): using it spent the turn
        return {"status": PLAYING, "turn": ENEMY, "new_enemy": False}
    return {"status": PLAYING, "turn": PLAYER, "new_enemy": True}


def apply_event_option(ps: PlayerState, option: Dict[str, Any]) -> str:
    effect = option.get("effect", "nothing")
    value = int(option.get("value", 0) or 0)
    if effect == "heal":
        heal(ps, value)
    elif effect == "damage":
        apply_self_damage(ps, value, floor=CAPS["event_damage_floor"])
    elif effect == "chakra":
        restore_chakra(ps, value)
    elif effect == "gold":
        ps.gold += value
    elif effect != "nothing":
        raise ValueError(f"unknown event effect '{effect}'")
    return option.get("result", "")


def buy_item(ps: PlayerState, item_id: str) -> Dict[str, Any]:
    item = ITEMS.get(item_id)
    if not item:
        return {"signal": REJECTED, "reason": "unknown_item", "log": f"The shop has no '{item_id}'."}
    price = int(item.get("price", 0))
    if ps.gold < price:
        return {"signal": REJECTED, "reason": "not_enough_gold", "log": f"Not enough gold for {item['name']}."}
    ps.gold -= price
    ps.inventory[item_id] = int(ps.inventory.get(item_id, 0) or 0) + 1
    return {"signal": OK, "log": f"Bought {item['name']} for {price} gold."}


def skill_name(skill_id: str) -> str:
    return SKILLS.get(skill_id, {}).get("name", skill_id)
