# games/shinobi/engine/session.py
from __future__ import annotations

import logging
import random
from dataclasses import asdict
from typing import Any, Dict, Optional

from .dice import rng_for
from .effects import reset_status, tick_cooldowns
from .enemy_ai import run_enemy_turn
from .models import (
    EnemyState,
    PlayerState,
    SessionState,
    MENU,
    PLAYING,
    LEVEL_UP,
    SHOP,
    EVENT,
    GAME_OVER,
    PLAYER,
    ENEMY,
    OK,
    REJECTED,
    END_TURN,
    VICTORY,
    DEFEAT,
    LEVELED_UP,
)
from . import progression
from .resolver import skill_cue, skill_status, use_item, use_skill, validate_item, validate_skill
from ..content.characters import CHARACTERS
from ..services.enemy_generator import training_dummy
from ..services.storage import default_save, new_player

logger = logging.getLogger(__name__)

# lines of the message log sent with each snapshot
SNAPSHOT_LOG_LINES = 30


class GameSession:
    """
    One player's run: MENU -> PLAYING <-> LEVEL_UP / SHOP / EVENT -> GAME_OVER -> MENU.

    Player actions are two-phase: begin_skill/begin_item validate and stage the
    action (returning the cinematic cue for the presentation layer), and
    resolve_action applies it and drives the turn through to the next point
    where the player has to decide something. use_skill/use_item do both.
    """

    def __init__(self, enemy_generator, store, rng: Optional[random.Random] = None):
        self.enemy_generator = enemy_generator
        self.store = store
        self.rng = rng or rng_for()
        self.state = SessionState()
        self.player: Optional[PlayerState] = None
        self.enemy: Optional[EnemyState] = None

    # Shorthands

    @property
    def status(self) -> str:
        return self.state.status

    @property
    def turn(self) -> str:
        return self.state.turn

    @property
    def log(self):
        return self.state.log

    def enemy_alive(self) -> bool:
        return self.enemy is not None and self.enemy.alive

    def add_log(self, message: str) -> None:
        if not message:
            return
        self.state.log.append(message)

    def _reject(self, reason: str, message: str) -> Dict[str, Any]:
        self.add_log(message)
        return {"signal": REJECTED, "reason": reason, "log": message}

    def _save(self) -> None:
        if not self.player:
            return
        try:
            self.store.save(self.player)
        except (OSError, ValueError, TypeError) as exc:
            logger.warning("Save failed for %s: %s", self.player.character_id, exc)

    # Menu

    def select_character(self, character_id: str) -> Dict[str, Any]:
        if self.status != MENU:
            return self._reject("not_in_menu", "Return to the village before choosing a character.")
        if character_id not in CHARACTERS:
            return self._reject("unknown_character", f"Unknown character '{character_id}'.")

        try:
            player = self.store.load(character_id)
        except (OSError, ValueError, KeyError, TypeError) as exc:
            logger.warning("Load failed for %s, starting fresh: %s", character_id, exc)
            player = new_player(character_id, default_save())

        self.player = player
        self.enemy = None
        self.state = SessionState(status=PLAYING, turn=PLAYER)
        self.add_log(f"Welcome, {CHARACTERS[character_id]['name']}. Your ninja way is loaded.")
        self._fetch_enemy()
        self._save()
        return {"signal": OK, "log": self.log[-1]}

    def back_to_menu(self) -> Dict[str, Any]:
        self._save()
        self.player = None
        self.enemy = None
        self.state = SessionState(status=MENU)
        return {"signal": OK, "log": ""}

    # Combat

    def _guard_action(self) -> Optional[Dict[str, Any]]:
        if self.status != PLAYING or not self.player:
            return self._reject("not_playing", "You are not in a fight.")
        if self.turn != PLAYER:
            return self._reject("not_player_turn", "Wait for your turn.")
        if self.state.pending or self.state.animation:
            return self._reject("action_pending", "An action is already underway.")
        if not self.enemy_alive():
            return self._reject("no_enemy", "There is no enemy to fight.")
        return None

    def begin_skill(self, skill_id: str) -> Dict[str, Any]:
        failure = self._guard_action()
        if failure:
            return failure
        failure = validate_skill(self.player, skill_id)
        if failure:
            self.add_log(failure["log"])
            return failure
        cue = skill_cue(skill_id)
        self.state.pending = {"kind": "skill", "id": skill_id}
        self.state.animation = cue
        return {"signal": OK, "cue": cue, "log": ""}

    def begin_item(self, item_id: str) -> Dict[str, Any]:
        failure = self._guard_action()
        if failure:
            return failure
        failure = validate_item(self.player, item_id)
        if failure:
            self.add_log(failure["log"])
            return failure
        self.state.pending = {"kind": "item", "id": item_id}
        return {"signal": OK, "cue": None, "log": ""}

    def resolve_action(self) -> Dict[str, Any]:
        action = self.state.pending
        if not action:
            return self._reject("nothing_pending", "No action to resolve.")
        self.state.pending = None
        self.state.animation = None

        if action["kind"] == "skill":
            result = use_skill(self.player, self.enemy, action["id"], self.rng)
        else:
            result = use_item(self.player, self.enemy, action["id"], self.rng)
        self.add_log(result["log"])

        signal = result["signal"]
        if signal == VICTORY:
            self._handle_victory()
        elif signal == LEVELED_UP:
            self.state.status = LEVEL_UP
        elif signal == END_TURN:
            self.state.turn = ENEMY
            result["enemy"] = self.enemy_turn()
        self._save()
        return result

    def use_skill(self, skill_id: str) -> Dict[str, Any]:
        staged = self.begin_skill(skill_id)
        if staged["signal"] == REJECTED:
            return staged
        return self.resolve_action()

    def use_item(self, item_id: str) -> Dict[str, Any]:
        staged = self.begin_item(item_id)
        if staged["signal"] == REJECTED:
            return staged
        return self.resolve_action()

    def skill_statuses(self) -> Dict[str, str]:
        if not self.player:
            return {}
        return {
            skill_id: skill_status(self.player, skill_id)
            for skill_id in CHARACTERS[self.player.character_id]["skills"]
        }

    def enemy_turn(self) -> Dict[str, Any]:
        if self.status != PLAYING or self.turn != ENEMY or not self.enemy_alive():
            return self._reject("not_enemy_turn", "It is not the enemy's turn.")

        result = run_enemy_turn(self.player, self.enemy, self.rng)
        for line in result["logs"]:
            self.add_log(line)

        if result["signal"] == VICTORY:
            self._handle_victory()
        elif result["signal"] == DEFEAT:
            self.state.status = GAME_OVER
            self.add_log(f"You fell at level {self.player.level}.")
        else:
            self._start_player_turn()
        self._save()
        return result

    def _start_player_turn(self) -> None:
        self.state.turn = PLAYER
        tick_cooldowns(self.player)

    def _handle_victory(self) -> None:
        outcome = progression.award_victory(self.player, self.enemy, self.rng)
        for line in outcome["logs"]:
            self.add_log(line)

        branch = outcome["next"]
        if branch == "level_up":
            self.state.status = LEVEL_UP
        elif branch == "shop":
            self.state.status = SHOP
            self.add_log("A travelling weapons shop sets up nearby.")
        elif branch == "event":
            self.state.status = EVENT
            self.state.current_event = outcome["event"]
            self.add_log(outcome["event"]["title"])
        else:
            self._fetch_enemy()

    def _fetch_enemy(self) -> None:
        level = self.player.level
        try:
            enemy = self.enemy_generator.generate(level)
        except Exception as exc:
            logger.warning("Enemy generation failed at level %s, using fallback: %s", level, exc)
            enemy = training_dummy(level)
            self.add_log("The summoning failed. A training dummy appears.")
        reset_status(enemy)
        self.enemy = enemy
        self.state.status = PLAYING
        self.state.turn = PLAYER
        self.add_log(f"A wild {enemy.name} appears!")

    # Level up / shop / events

    def upgrade_skill(self, skill_id: str) -> Dict[str, Any]:
        if self.status != LEVEL_UP:
            return self._reject("not_leveling", "There is nothing to learn right now.")
        result = progression.upgrade_skill(self.player, skill_id)
        self.add_log(result["log"])
        if result["signal"] == REJECTED:
            return result

        route = progression.route_after_upgrade(self.player, self.enemy_alive())
        self.state.status = route["status"]
        if route["turn"]:
            self.state.turn = route["turn"]
        if route["new_enemy"]:
            self._fetch_enemy()
        elif self.status == PLAYING and self.turn == ENEMY:
            result["enemy"] = self.enemy_turn()
        elif self.status == SHOP:
            self.add_log("Time to restock. The shop is open.")
        self._save()
        return result

    def open_shop(self) -> Dict[str, Any]:
        failure = self._guard_action()
        if failure:
            return failure
        self.state.status = SHOP
        return {"signal": OK, "log": ""}

    def buy_item(self, item_id: str) -> Dict[str, Any]:
        if self.status != SHOP:
            return self._reject("shop_closed", "The shop is closed.")
        result = progression.buy_item(self.player, item_id)
        self.add_log(result["log"])
        if result["signal"] != REJECTED:
            self._save()
        return result

    def close_shop(self) -> Dict[str, Any]:
        if self.status != SHOP:
            return self._reject("shop_closed", "The shop is closed.")
        if self.enemy_alive():
            self.state.status = PLAYING
        else:
            self._fetch_enemy()
        return {"signal": OK, "log": ""}

    def choose_event_option(self, index: int) -> Dict[str, Any]:
        event = self.state.current_event
        if self.status != EVENT or not event:
            return self._reject("no_event", "Nothing is happening here.")
        options = event.get("options", [])
        if not isinstance(index, int) or not 0 <= index < len(options):
            return self._reject("bad_option", "That is not one of the choices.")

        message = progression.apply_event_option(self.player, options[index])
        self.add_log(message)
        self.state.current_event = None
        self._fetch_enemy()
        self._save()
        return {"signal": OK, "log": message}

    def change_image(self, image_url: str) -> Dict[str, Any]:
        if not self.player or self.status in (MENU, GAME_OVER):
            return self._reject("no_player", "Choose a character first.")
        if not image_url:
            return self._reject("bad_image", "No image given.")
        self.player.image_url = image_url
        self.add_log("The genjutsu takes hold. Your appearance has changed.")
        self._save()
        return {"signal": OK, "log": self.log[-1]}

    def snapshot(self) -> Dict[str, Any]:
        return {
            "status": self.status,
            "turn": self.turn,
            "animation": self.state.animation,
            "pending": bool(self.state.pending),
            "log": self.log[-SNAPSHOT_LOG_LINES:],
            "log_length": len(self.log),
            "player": asdict(self.player) if self.player else None,
            "enemy": asdict(self.enemy) if self.enemy else None,
            "skills": self.skill_statuses(),
            "current_event": self.state.current_event,
        }
