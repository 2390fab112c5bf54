# games/shinobi/services/enemy_generator.py
"""
Enemy generation collaborators.

Every generator exposes generate(level) -> EnemyState and may raise; the
session falls back to a training dummy when it does.
"""

import json
import logging
import math
import os
import random
from typing import Any, Dict, Optional

from openai import OpenAI

from ..content.balance import ENEMY
from ..engine.dice import pick_index
from ..engine.models import EnemyState

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "gpt-4o-mini"

ROSTER = [
    {"name": "Rogue Ninja", "hp": 50, "attack": 5, "description": "A deserter from the Hidden Mist."},
    {"name": "Sound Ninja", "hp": 70, "attack": 8, "description": "One of Orochimaru's test subjects."},
    {"name": "Bandit Chief", "hp": 60, "attack": 6, "description": "Leader of the local bandit gang."},
]

ENEMY_PROMPT = """
Generate a Naruto-themed enemy for a level {level} player.
The enemy should be appropriate for this level; difficulty scales slightly with level.
Return JSON only, as an object with exactly these keys:
  "name" (string), "hp_max" (integer), "attack" (integer), "description" (string).
"""


class EnemyGenerationError(Exception):
    pass


def training_dummy(level: int) -> EnemyState:
    hp = ENEMY["dummy_hp_base"] + level * ENEMY["dummy_hp_per_level"]
    return EnemyState(
        name="Training Dummy",
        hp=hp,
        hp_max=hp,
        attack=ENEMY["dummy_attack_base"] + level * ENEMY["dummy_attack_per_level"],
        description="Made of wood and straw.",
    )


def enemy_from_payload(payload: Dict[str, Any]) -> EnemyState:
    try:
        name = str(payload["name"]).strip()
        hp_max = int(payload["hp_max"])
        attack = int(payload["attack"])
    except (KeyError, TypeError, ValueError) as exc:
        raise EnemyGenerationError(f"malformed enemy payload: {exc}") from exc
    if not name or hp_max <= 0 or attack < 0:
        raise EnemyGenerationError(f"enemy payload out of range: {payload!r}")
    return EnemyState(
        name=name,
        hp=hp_max,
        hp_max=hp_max,
        attack=attack,
        description=str(payload.get("description", "")),
        image_url=payload.get("image_url"),
    )


class RosterEnemyGenerator:
    """Offline generator: a fixed roster scaled by the player's level."""

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    def generate(self, level: int) -> EnemyState:
        base = ROSTER[pick_index(len(ROSTER), self.rng)]
        scale = 1 + level * ENEMY["roster_scale_per_level"]
        hp = math.floor(base["hp"] * scale)
        return EnemyState(
            name=base["name"],
            hp=hp,
            hp_max=hp,
            attack=math.floor(base["attack"] * scale),
            description=base["description"],
        )


class OpenAIEnemyGenerator:
    def __init__(self, openai_client, model: str = DEFAULT_MODEL):
        """
        openai_client: already-authenticated OpenAI client
        model: e.g. "gpt-4o-mini"
        """
        self.client = openai_client
        self.model = model

    def generate(self, level: int) -> EnemyState:
        response = self.client.responses.create(
            model=self.model,
            input=[
                {"role": "system", "content": "You design enemies for a ninja roguelike. Reply with JSON only."},
                {"role": "user", "content": ENEMY_PROMPT.format(level=level).strip()},
            ],
            max_output_tokens=300,
        )
        text = self._extract_text(response)
        if not text:
            raise EnemyGenerationError("no data returned")
        try:
            payload = json.loads(text)
        except ValueError as exc:
            raise EnemyGenerationError(f"response is not JSON: {text[:80]!r}") from exc
        if not isinstance(payload, dict):
            raise EnemyGenerationError("response is not a JSON object")
        return enemy_from_payload(payload)

    def _extract_text(self, response) -> str:
        parts = []
        for item in response.output:
            if getattr(item, "type", None) == "message":
                for c in item.content:
                    if getattr(c, "type", None) == "output_text":
                        parts.append(c.text)
        text = " ".join(parts).strip()
        # tolerate ```json fences
        if text.startswith("```"):
            text = text.strip("`")
            if text.lower().startswith("json"):
                text = text[4:]
        return text.strip()


def build_default_generator(rng: Optional[random.Random] = None):
    api_key = os.environ.get("OPENAI_API_KEY")
    if not api_key:
        logger.warning("No OPENAI_API_KEY set; enemies come from the offline roster.")
        return RosterEnemyGenerator(rng)
    model = os.environ.get("SHINOBI_ENEMY_MODEL", DEFAULT_MODEL)
    logger.info("Using OpenAI enemy generator with model=%s", model)
    return OpenAIEnemyGenerator(OpenAI(api_key=api_key), model=model)
