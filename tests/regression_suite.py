"""Automated regression suite for the shinobi combat engine.

Uses stdlib only and directly exercises the resolver, the enemy turn and the
progression rules. Randomness is scripted through FixedRng so every roll in a
scenario is spelled out.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import List, Tuple


_REPO_ROOT = Path(__file__).resolve().parents[1]
if str(_REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(_REPO_ROOT))

from games.shinobi.engine import effects, progression, resolver  # noqa: E402
from games.shinobi.engine.enemy_ai import run_enemy_turn  # noqa: E402
from games.shinobi.engine.models import (  # noqa: E402
    DEFEAT,
    END_TURN,
    ENEMY,
    LEVELED_UP,
    OK,
    PLAYER,
    PLAYER_TURN,
    PLAYING,
    REJECTED,
    SHOP,
    VICTORY,
    EnemyState,
)
from games.shinobi.content.events import RANDOM_EVENTS  # noqa: E402
from games.shinobi.services.storage import default_save, new_player  # noqa: E402


class FixedRng:
    """Stands in for random.Random: hands out the scripted draws in order."""

    def __init__(self, *draws: float):
        self.draws = list(draws)

    def random(self) -> float:
        assert self.draws, "scenario consumed more random draws than scripted"
        return self.draws.pop(0)

    @property
    def exhausted(self) -> bool:
        return not self.draws


def make_player(character_id: str = "naruto", **skill_levels):
    ps = new_player(character_id, default_save())
    ps.skills.update(skill_levels)
    return ps


def make_enemy(hp: int = 90, hp_max: int = None, attack: int = 20, name: str = "Rogue Ninja") -> EnemyState:
    return EnemyState(name=name, hp=hp, hp_max=hp_max if hp_max is not None else hp, attack=attack)


def event_named(event_id: str):
    return next(event for event in RANDOM_EVENTS if event["id"] == event_id)


# Player actions

def scenario_rasengan_hits_and_ends_turn():
    ps = make_player(n_2=1)
    enemy = make_enemy(hp=90)
    rng = FixedRng()

    result = resolver.use_skill(ps, enemy, "n_2", rng)

    assert result["signal"] == END_TURN, result
    assert result["damage"] == 44, result["damage"]
    assert enemy.hp == 46, enemy.hp
    assert ps.chakra == 80, ps.chakra
    assert ps.cooldowns == {"n_2": 2}, ps.cooldowns
    assert "Rasengan deals 44 damage." in result["log"], result["log"]


def scenario_rasengan_finishing_blow():
    ps = make_player(n_2=1)
    enemy = make_enemy(hp=40)

    result = resolver.use_skill(ps, enemy, "n_2", FixedRng())

    assert result["signal"] == VICTORY, result
    assert enemy.hp == -4, enemy.hp
    assert not enemy.alive


def scenario_burn_kills_before_enemy_acts():
    ps = make_player()
    enemy = make_enemy(hp=4, hp_max=100, attack=50)
    enemy.status.burn = 1
    hp_before = ps.hp

    result = run_enemy_turn(ps, enemy, FixedRng())

    assert result["signal"] == VICTORY, result
    assert enemy.hp == -1, enemy.hp
    assert enemy.status.burn == 0
    assert ps.hp == hp_before, "a burned-out enemy must not attack"


def scenario_poison_kunai_stacks_burn():
    ps = make_player()
    ps.inventory = {"item_poison_kunai": 1}
    enemy = make_enemy(hp=50)
    enemy.status.burn = 2

    result = resolver.use_item(ps, enemy, "item_poison_kunai", FixedRng())

    assert result["signal"] == END_TURN, result
    assert enemy.hp == 30, enemy.hp
    assert enemy.status.burn == 5, enemy.status.burn
    assert "item_poison_kunai" not in ps.inventory, ps.inventory


def scenario_fireball_burn_overwrites():
    ps = make_player("sasuke", s_2=1)
    enemy = make_enemy(hp=200)
    enemy.status.burn = 1

    resolver.use_skill(ps, enemy, "s_2", FixedRng())

    assert enemy.status.burn == 3, enemy.status.burn
    assert enemy.hp == 200 - 33, enemy.hp


def scenario_rejections_leave_state_unchanged():
    ps = make_player(n_2=1)
    ps.chakra = 10
    enemy = make_enemy(hp=90)

    first = resolver.use_skill(ps, enemy, "n_2", FixedRng())
    again = resolver.use_skill(ps, enemy, "n_2", FixedRng())
    assert first["signal"] == REJECTED and first["reason"] == "not_enough_chakra", first
    assert again["reason"] == first["reason"]
    assert ps.chakra == 10 and enemy.hp == 90 and not ps.cooldowns

    ps.chakra = 100
    assert resolver.use_skill(ps, enemy, "n_7", FixedRng())["reason"] == "skill_locked"
    assert resolver.use_skill(ps, enemy, "s_1", FixedRng())["reason"] == "unknown_skill"
    assert resolver.use_skill(ps, enemy, "nope", FixedRng())["reason"] == "unknown_skill"

    ps.cooldowns = {"n_2": 1}
    blocked = resolver.use_skill(ps, enemy, "n_2", FixedRng())
    assert blocked["reason"] == "on_cooldown", blocked
    assert ps.chakra == 100 and enemy.hp == 90

    ps.inventory = {}
    assert resolver.use_item(ps, enemy, "item_heal_1", FixedRng())["reason"] == "item_missing"
    assert resolver.use_item(ps, enemy, "item_bogus", FixedRng())["reason"] == "unknown_item"


def scenario_skill_status_reporting():
    ps = make_player(n_2=1, n_5=1)
    ps.chakra = 50
    ps.cooldowns = {"n_2": 1}

    assert resolver.skill_status(ps, "n_1") == "ready"
    assert resolver.skill_status(ps, "n_2") == "cooldown"
    assert resolver.skill_status(ps, "n_5") == "no_chakra"
    assert resolver.skill_status(ps, "n_7") == "locked"


def scenario_lion_combo_crit_roll():
    ps = make_player("sasuke")
    enemy = make_enemy(hp=200)

    crit = resolver.use_skill(ps, enemy, "s_1", FixedRng(0.2))
    assert crit["crit"] is True and crit["damage"] == 33, crit
    assert crit["log"].startswith("Critical hit!"), crit["log"]

    plain = resolver.use_skill(ps, enemy, "s_1", FixedRng(0.7))
    assert plain["crit"] is False and plain["damage"] == 22, plain
    assert enemy.hp == 200 - 33 - 22


def scenario_indra_always_crits_without_a_roll():
    ps = make_player("sasuke", s_5=1)
    enemy = make_enemy(hp=500)
    rng = FixedRng()

    result = resolver.use_skill(ps, enemy, "s_5", rng)

    assert result["crit"] is True
    assert result["damage"] == 198, result["damage"]
    assert result["cue"] == "indra"
    assert ps.chakra == 120 - 75


def scenario_sage_mode_heals_and_empowers():
    ps = make_player(n_4=1)
    ps.hp = 50
    enemy = make_enemy(hp=90)

    result = resolver.use_skill(ps, enemy, "n_4", FixedRng())
    assert result["signal"] == END_TURN
    assert result["damage"] == 0 and enemy.hp == 90, "defense skills deal no damage"
    assert result["healing"] == 39 and ps.hp == 89, ps.hp
    assert ps.buffs.attack_mult == 1.2

    followup = resolver.use_skill(ps, enemy, "n_1", FixedRng())
    assert followup["damage"] == 19, followup["damage"]


def scenario_rasenshuriken_drains_life():
    ps = make_player(n_5=1)
    ps.hp = 40
    enemy = make_enemy(hp=200)

    result = resolver.use_skill(ps, enemy, "n_5", FixedRng())

    assert result["damage"] == 110, result["damage"]
    assert ps.hp == 95, ps.hp
    assert enemy.hp == 90, enemy.hp
    assert "(drains 55 HP)" in result["log"], result["log"]


def scenario_stun_chances():
    ps = make_player("sasuke", s_3=1)
    enemy = make_enemy(hp=500)

    resolver.use_skill(ps, enemy, "s_3", FixedRng(0.2))
    assert enemy.status.stun is True

    enemy.status.stun = False
    ps.cooldowns = {}
    resolver.use_skill(ps, enemy, "s_3", FixedRng(0.5))
    assert enemy.status.stun is False

    kakashi = make_player("kakashi", k_6=1)
    resolver.use_skill(kakashi, enemy, "k_6", FixedRng())
    assert enemy.status.stun is True, "a certain stun needs no roll"


def scenario_defensive_skills_set_buffs():
    kakashi = make_player("kakashi", k_2=1, k_4=1, k_5=1)
    enemy = make_enemy(hp=500)

    resolver.use_skill(kakashi, enemy, "k_2", FixedRng())
    assert kakashi.buffs.defense == 0.5

    resolver.use_skill(kakashi, enemy, "k_4", FixedRng())
    assert enemy.status.attack_down == 2

    kakashi.chakra = kakashi.chakra_max
    resolver.use_skill(kakashi, enemy, "k_5", FixedRng())
    assert kakashi.buffs.invulnerable is True

    sasuke = make_player("sasuke", s_4=1)
    resolver.use_skill(sasuke, enemy, "s_4", FixedRng())
    assert sasuke.buffs.defense == 1000

    naruto = make_player(n_3=1)
    resolver.use_skill(naruto, enemy, "n_3", FixedRng())
    assert naruto.buffs.evasion == 30


def scenario_items_floor_self_damage():
    ps = make_player()
    ps.inventory = {"item_cursed_pill": 1, "item_special_1": 1, "item_flash_bomb": 1}
    ps.hp = 30
    enemy = make_enemy(hp=90)

    resolver.use_item(ps, enemy, "item_cursed_pill", FixedRng())
    assert ps.hp == 1, ps.hp
    assert ps.buffs.attack_mult == 1.5

    ps.hp = 25
    ps.chakra = 0
    resolver.use_item(ps, enemy, "item_special_1", FixedRng())
    assert ps.chakra == ps.chakra_max and ps.hp == 5, (ps.chakra, ps.hp)

    result = resolver.use_item(ps, enemy, "item_flash_bomb", FixedRng())
    assert enemy.status.stun is True and result["damage"] == 0 and enemy.hp == 90
    assert ps.inventory == {}, ps.inventory


def scenario_upgrade_pill_levels_in_combat():
    ps = make_player()
    ps.inventory = {"item_upgrade_pill": 1}
    ps.xp = 50
    ps.hp = 10
    ps.buffs.evasion = 30
    ps.cooldowns = {"n_2": 2}
    enemy = make_enemy(hp=90)

    result = resolver.use_item(ps, enemy, "item_upgrade_pill", FixedRng())

    assert result["signal"] == LEVELED_UP, result
    assert ps.level == 2 and ps.xp == 0, (ps.level, ps.xp)
    assert ps.hp == ps.hp_max == 132, ps.hp
    assert ps.buffs.evasion == 30 and ps.cooldowns == {"n_2": 2}, "pill keeps combat state"
    assert enemy.hp == 90


# Enemy turn

def scenario_stunned_enemy_skips_turn():
    ps = make_player()
    enemy = make_enemy(hp=90)
    enemy.status.stun = True

    result = run_enemy_turn(ps, enemy, FixedRng())

    assert result["signal"] == PLAYER_TURN and result["feedback"] == "Stunned!"
    assert enemy.status.stun is False
    assert ps.hp == ps.hp_max


def scenario_evasion_dodges_and_persists():
    ps = make_player()
    ps.buffs.evasion = 30
    enemy = make_enemy(hp=90, attack=20)

    dodged = run_enemy_turn(ps, enemy, FixedRng(0.2))
    assert dodged["feedback"] == "Evaded!" and ps.hp == ps.hp_max
    assert ps.buffs.evasion == 30

    hit = run_enemy_turn(ps, enemy, FixedRng(0.5, 0.0))
    assert hit["damage"] == 16, hit
    assert ps.hp == ps.hp_max - 16


def scenario_defenses_in_priority_order():
    ps = make_player()
    enemy = make_enemy(hp=90, attack=20)

    ps.buffs.invulnerable = True
    ps.buffs.defense = 1000
    phased = run_enemy_turn(ps, enemy, FixedRng(0.0))
    assert phased["feedback"] == "Phased!" and phased["damage"] == 0
    assert ps.buffs.invulnerable is False and ps.buffs.defense == 1000

    blocked = run_enemy_turn(ps, enemy, FixedRng(0.0))
    assert blocked["feedback"] == "Blocked!" and blocked["damage"] == 0
    assert ps.buffs.defense == 0

    ps.buffs.defense = 0.5
    guarded = run_enemy_turn(ps, enemy, FixedRng(0.0))
    assert guarded["feedback"] == "Guarded!" and guarded["damage"] == 8, guarded
    assert ps.buffs.defense == 0
    assert ps.hp == ps.hp_max - 8


def scenario_attack_down_weakens_and_expires():
    ps = make_player()
    enemy = make_enemy(hp=90, attack=20)
    enemy.status.attack_down = 2

    first = run_enemy_turn(ps, enemy, FixedRng(0.0))
    assert first["damage"] == 11, first
    assert enemy.status.attack_down == 1

    run_enemy_turn(ps, enemy, FixedRng(0.0))
    third = run_enemy_turn(ps, enemy, FixedRng(0.0))
    assert enemy.status.attack_down == 0
    assert third["damage"] == 16, third


def scenario_player_defeat_clamps_hp():
    ps = make_player()
    ps.hp = 5
    enemy = make_enemy(hp=90, attack=20)

    result = run_enemy_turn(ps, enemy, FixedRng(0.0))

    assert result["signal"] == DEFEAT, result
    assert ps.hp == 0


def scenario_cooldowns_tick_and_clear():
    ps = make_player()
    ps.cooldowns = {"n_2": 2, "n_3": 1}
    effects.tick_cooldowns(ps)
    assert ps.cooldowns == {"n_2": 1}, ps.cooldowns

    ps.buffs.defense = 0.5
    effects.clear_combat_buffs(ps)
    assert ps.cooldowns == {} and ps.buffs.defense == 0


# Progression

def scenario_victory_rewards_at_level_one():
    ps = make_player()
    ps.hp, ps.chakra = 50, 10
    ps.buffs.evasion = 30
    ps.cooldowns = {"n_2": 1}
    enemy = make_enemy(hp=0, hp_max=60)
    rng = FixedRng(0.5)

    outcome = progression.award_victory(ps, enemy, rng)

    assert outcome["next"] == "battle", outcome
    assert outcome["gold"] == 30 and outcome["xp"] == 30, outcome
    assert ps.gold == 30 and ps.xp == 30
    assert ps.hp == 62 and ps.chakra == 30, (ps.hp, ps.chakra)
    assert ps.buffs.evasion == 0 and ps.cooldowns == {}
    assert rng.exhausted, "level one never rolls a branch"


def scenario_victory_levels_up_with_carry_over():
    ps = make_player()
    ps.xp = 90
    ps.hp = 3
    ps.cooldowns = {"n_2": 1}
    enemy = make_enemy(hp=0, hp_max=40)

    outcome = progression.award_victory(ps, enemy, FixedRng(0.0))

    assert outcome["next"] == "level_up", outcome
    assert ps.level == 2 and ps.xp == 10 and ps.xp_max == 120, (ps.level, ps.xp, ps.xp_max)
    assert ps.hp == ps.hp_max == 132
    assert ps.chakra == ps.chakra_max == 110
    assert ps.cooldowns == {}


def scenario_victory_branches_above_level_one():
    def fresh():
        ps = make_player()
        ps.level, ps.xp_max = 2, 120
        return ps

    enemy = make_enemy(hp=0, hp_max=20)
    assert progression.award_victory(fresh(), enemy, FixedRng(0.0, 0.1))["next"] == "shop"
    assert progression.award_victory(fresh(), enemy, FixedRng(0.0, 0.9))["next"] == "battle"

    outcome = progression.award_victory(fresh(), enemy, FixedRng(0.0, 0.45, 0.0))
    assert outcome["next"] == "event"
    assert outcome["event"]["id"] == "event_ramen", outcome["event"]


def scenario_upgrade_routing():
    ps = make_player()
    result = progression.upgrade_skill(ps, "n_2")
    assert result["signal"] == OK and ps.skills["n_2"] == 1
    assert progression.upgrade_skill(ps, "s_1")["signal"] == REJECTED

    ps.level = 3
    assert progression.route_after_upgrade(ps, enemy_alive=True)["status"] == SHOP
    ps.level = 2
    assert progression.route_after_upgrade(ps, enemy_alive=True) == {
        "status": PLAYING, "turn": ENEMY, "new_enemy": False,
    }
    assert progression.route_after_upgrade(ps, enemy_alive=False) == {
        "status": PLAYING, "turn": PLAYER, "new_enemy": True,
    }


def scenario_event_options_and_shop():
    ps = make_player()
    ps.hp = 10
    trap = event_named("event_trap")
    message = progression.apply_event_option(ps, trap["options"][0])
    assert ps.hp == 1, "event damage never kills"
    assert "20 damage" in message

    merchant = event_named("event_merchant")
    progression.apply_event_option(ps, merchant["options"][0])
    assert ps.gold == 50

    poor = progression.buy_item(ps, "item_poison_kunai")
    assert poor["signal"] == REJECTED and poor["reason"] == "not_enough_gold"
    assert ps.gold == 50

    bought = progression.buy_item(ps, "item_heal_1")
    assert bought["signal"] == OK
    assert ps.gold == 20 and ps.inventory["item_heal_1"] == 2
    assert progression.buy_item(ps, "item_nothing")["reason"] == "unknown_item"


SCENARIOS = [
    scenario_rasengan_hits_and_ends_turn,
    scenario_rasengan_finishing_blow,
    scenario_burn_kills_before_enemy_acts,
    scenario_poison_kunai_stacks_burn,
    scenario_fireball_burn_overwrites,
    scenario_rejections_leave_state_unchanged,
    scenario_skill_status_reporting,
    scenario_lion_combo_crit_roll,
    scenario_indra_always_crits_without_a_roll,
    scenario_sage_mode_heals_and_empowers,
    scenario_rasenshuriken_drains_life,
    scenario_stun_chances,
    scenario_defensive_skills_set_buffs,
    scenario_items_floor_self_damage,
    scenario_upgrade_pill_levels_in_combat,
    scenario_stunned_enemy_skips_turn,
    scenario_evasion_dodges_and_persists,
    scenario_defenses_in_priority_order,
    scenario_attack_down_weakens_and_expires,
    scenario_player_defeat_clamps_hp,
    scenario_cooldowns_tick_and_clear,
    scenario_victory_rewards_at_level_one,
    scenario_victory_levels_up_with_carry_over,
    scenario_victory_branches_above_level_one,
    scenario_upgrade_routing,
    scenario_event_options_and_shop,
]


def run_all() -> List[Tuple[str, bool, str]]:
    results: List[Tuple[str, bool, str]] = []
    for scenario in SCENARIOS:
        try:
            scenario()
            results.append((scenario.__name__, True, ""))
        except AssertionError as exc:
            results.append((scenario.__name__, False, str(exc)))
    return results
