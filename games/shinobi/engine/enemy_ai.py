# games/shinobi/engine/enemy_ai.py
import math
import random
from typing import Any, Dict, List, Optional

from .dice import percent_roll
from .models import EnemyState, PlayerState, VICTORY, DEFEAT, PLAYER_TURN
from .rules import burn_tick, enemy_attack_roll
from ..content.balance import ENEMY


def _result(signal: str, logs: List[str], damage: int = 0, feedback: Optional[str] = None) -> Dict[str, Any]:
    return {"signal": signal, "logs": logs, "damage": damage, "feedback": feedback}


def tick_burn(enemy: EnemyState, logs: List[str]) -> int:
    if enemy.status.burn <= 0:
        return 0
    dmg = burn_tick(enemy.hp_max)
    enemy.hp -= dmg
    enemy.status.burn -= 1
    logs.append(f"{enemy.name} takes {dmg} burn damage!")
    return dmg


def absorb_hit(ps: PlayerState, dmg: int, enemy_name: str, logs: List[str]):
    """
    Player defenses against one incoming hit, in priority order:
    invulnerable, absolute block, fractional guard. Each is spent by the hit.
    Returns (damage, feedback).
    """
    buffs = ps.buffs
    if buffs.invulnerable:
        buffs.invulnerable = False
        logs.append(f"{enemy_name} attacks, but the blow phases straight through you!")
        return 0, "Phased!"
    if buffs.defense and buffs.defense >= ENEMY["absolute_block"]:
        buffs.defense = 0
        logs.append("Your shield blocks all of the damage!")
        return 0, "Blocked!"
    if buffs.defense and 0 < buffs.defense < 1:
        fraction = buffs.defense
        buffs.defense = 0
        return math.floor(dmg * fraction), "Guarded!"
    return dmg, None


def run_enemy_turn(ps: PlayerState, enemy: EnemyState, r: random.Random) -> Dict[str, Any]:
    """
    One full enemy turn: burn, stun, evasion, attack, defenses, damage.
    A burn kill ends the turn before the enemy can act.
    """
    logs: List[str] = []

    tick_burn(enemy, logs)
    if enemy.hp <= 0:
        return _result(VICTORY, logs)

    if enemy.status.stun:
        enemy.status.stun = False
        logs.append(f"{enemy.name} is stunned and cannot act!")
        return _result(PLAYER_TURN, logs, feedback="Stunned!")

    if ps.buffs.evasion and percent_roll(r) < ps.buffs.evasion:
        # evasion is a lasting technique; only the end of the fight clears it
        logs.append(f"Substitution! You dodge {enemy.name}'s attack.")
        return _result(PLAYER_TURN, logs, feedback="Evaded!")

    dmg = enemy_attack_roll(enemy.attack, r.random())
    if enemy.status.attack_down > 0:
        dmg = math.floor(dmg * ENEMY["attack_down_mult"])
        enemy.status.attack_down -= 1

    dmg, feedback = absorb_hit(ps, dmg, enemy.name, logs)
    if feedback not in ("Phased!", "Blocked!"):
        logs.append(f"{enemy.name} attacks! You take {dmg} damage.")

    ps.hp = max(0, ps.hp - dmg)
    if ps.hp <= 0:
        logs.append("You collapse...")
        return _result(DEFEAT, logs, damage=dmg, feedback=feedback)
    return _result(PLAYER_TURN, logs, damage=dmg, feedback=feedback)
