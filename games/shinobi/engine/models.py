# games/shinobi/engine/models.py
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Any

# Session status
MENU = "menu"
PLAYING = "playing"
LEVEL_UP = "level_up"
SHOP = "shop"
EVENT = "event"
GAME_OVER = "game_over"

# Turn owner, only meaningful while PLAYING
PLAYER = "player"
ENEMY = "enemy"

# Resolver signals
REJECTED = "rejected"
END_TURN = "end_turn"
PLAYER_TURN = "player_turn"
VICTORY = "victory"
DEFEAT = "defeat"
LEVELED_UP = "level_up"
OK = "ok"


@dataclass
class Buffs:
    invulnerable: bool = False
    evasion: int = 0            # percent chance to dodge
    defense: float = 0          # >= 100 blocks the next hit, < 1 scales it
    attack_mult: float = 0      # 0 means no multiplier

    def clear(self) -> None:
        self.invulnerable = False
        self.evasion = 0
        self.defense = 0
        self.attack_mult = 0


@dataclass
class PlayerState:
    character_id: str
    image_url: str = ""
    hp: int = 0
    hp_max: int = 0
    chakra: int = 0
    chakra_max: int = 0
    level: int = 1
    xp: int = 0
    xp_max: int = 100
    skills: Dict[str, int] = field(default_factory=dict)      # skill_id -> level (0 = locked)
    gold: int = 0
    inventory: Dict[str, int] = field(default_factory=dict)   # item_id -> quantity
    buffs: Buffs = field(default_factory=Buffs)
    cooldowns: Dict[str, int] = field(default_factory=dict)   # skill_id -> turns left


@dataclass
class StatusEffects:
    burn: int = 0          # ticks left
    stun: bool = False     # skips the next enemy turn
    attack_down: int = 0   # ticks left


@dataclass
class EnemyState:
    name: str
    hp: int
    hp_max: int
    attack: int
    description: str = ""
    image_url: Optional[str] = None
    status: StatusEffects = field(default_factory=StatusEffects)

    @property
    def alive(self) -> bool:
        return self.hp > 0


@dataclass
class SessionState:
    status: str = MENU                     # menu | playing | level_up | shop | event | game_over
    turn: str = PLAYER                     # player | enemy
    log: List[str] = field(default_factory=list)
    animation: Optional[str] = None        # cinematic cue while an action is staged
    pending: Optional[Dict[str, Any]] = None
    current_event: Optional[Dict[str, Any]] = None
