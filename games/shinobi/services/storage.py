# games/shinobi/services/storage.py
"""
Save data for the shinobi game.

Gold and the item pouch are shared by every character; level, XP, stat caps,
skill levels and portrait are kept per character. Current HP/chakra, buffs and
cooldowns are never saved: a loaded character starts fresh and fully restored.
"""
import copy
import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

from ..content.balance import DEFAULTS
from ..content.characters import CHARACTERS
from ..engine.models import PlayerState

logger = logging.getLogger(__name__)

SAVE_VERSION = 1


def default_save() -> Dict[str, Any]:
    return {
        "version": SAVE_VERSION,
        "gold": DEFAULTS["starting_gold"],
        "inventory": dict(DEFAULTS["starting_inventory"]),
        "characters": {},
    }


def new_player(character_id: str, data: Dict[str, Any]) -> PlayerState:
    """Fresh character: only the first skill is learned."""
    config = CHARACTERS[character_id]
    skills = {skill_id: (1 if idx == 0 else 0) for idx, skill_id in enumerate(config["skills"])}
    return PlayerState(
        character_id=character_id,
        image_url=config["image"],
        hp=config["hp"],
        hp_max=config["hp"],
        chakra=config["chakra"],
        chakra_max=config["chakra"],
        level=1,
        xp=0,
        xp_max=DEFAULTS["xp_max"],
        skills=skills,
        gold=int(data.get("gold", 0) or 0),
        inventory=_clean_inventory(data.get("inventory")),
    )


def _clean_inventory(raw: Any) -> Dict[str, int]:
    if not isinstance(raw, dict):
        return {}
    return {str(item_id): int(qty) for item_id, qty in raw.items() if int(qty or 0) > 0}


def player_from_save(character_id: str, data: Dict[str, Any]) -> PlayerState:
    if character_id not in CHARACTERS:
        raise KeyError(f"unknown character '{character_id}'")
    characters = data.get("characters")
    saved = characters.get(character_id) if isinstance(characters, dict) else None
    if not saved or not isinstance(saved, dict):
        return new_player(character_id, data)

    config = CHARACTERS[character_id]
    skills = {skill_id: 0 for skill_id in config["skills"]}
    saved_skills = saved.get("skills")
    for skill_id, level in (saved_skills.items() if isinstance(saved_skills, dict) else ()):
        if skill_id in skills:
            skills[skill_id] = int(level)
    hp_max = int(saved["hp_max"])
    chakra_max = int(saved["chakra_max"])
    return PlayerState(
        character_id=character_id,
        image_url=saved.get("image_url") or config["image"],
        hp=hp_max,
        hp_max=hp_max,
        chakra=chakra_max,
        chakra_max=chakra_max,
        level=int(saved["level"]),
        xp=int(saved["xp"]),
        xp_max=int(saved["xp_max"]),
        skills=skills,
        gold=int(data.get("gold", 0) or 0),
        inventory=_clean_inventory(data.get("inventory")),
    )


def merge_player(data: Dict[str, Any], ps: PlayerState) -> Dict[str, Any]:
    merged = copy.deepcopy(data)
    merged["version"] = SAVE_VERSION
    merged["gold"] = ps.gold
    merged["inventory"] = dict(ps.inventory)
    if not isinstance(merged.get("characters"), dict):
        merged["characters"] = {}
    merged["characters"][ps.character_id] = {
        "level": ps.level,
        "xp": ps.xp,
        "xp_max": ps.xp_max,
        "hp_max": ps.hp_max,
        "chakra_max": ps.chakra_max,
        "skills": dict(ps.skills),
        "image_url": ps.image_url,
    }
    return merged


class SaveStore:
    """load(character_id) -> PlayerState and save(player) over some backing blob."""

    def _read(self) -> Dict[str, Any]:
        raise NotImplementedError

    def _write(self, data: Dict[str, Any]) -> None:
        raise NotImplementedError

    def load(self, character_id: str) -> PlayerState:
        return player_from_save(character_id, self._read())

    def save(self, ps: PlayerState) -> None:
        self._write(merge_player(self._read(), ps))


class MemorySaveStore(SaveStore):
    def __init__(self, data: Optional[Dict[str, Any]] = None):
        self.data = copy.deepcopy(data) if data is not None else default_save()
        self.saves = 0

    def _read(self) -> Dict[str, Any]:
        return copy.deepcopy(self.data)

    def _write(self, data: Dict[str, Any]) -> None:
        self.data = data
        self.saves += 1


class JsonSaveStore(SaveStore):
    def __init__(self, path: str | Path = "shinobi_save.json"):
        self.path = path if isinstance(path, Path) else Path(str(path))

    def _read(self) -> Dict[str, Any]:
        if not self.path.exists():
            return default_save()
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            logger.warning("Unreadable save at %s, starting over: %s", self.path, exc)
            return default_save()
        if not isinstance(data, dict):
            logger.warning("Save at %s is not an object, starting over", self.path)
            return default_save()
        return data

    def _write(self, data: Dict[str, Any]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(data, indent=2), encoding="utf-8")


def build_default_store() -> SaveStore:
    path = os.environ.get("SHINOBI_SAVE_PATH")
    if path:
        return JsonSaveStore(path)
    return MemorySaveStore()
