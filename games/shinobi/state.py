# games/shinobi/state.py
from typing import Callable, Dict, Optional

from .engine.session import GameSession
from .services.enemy_generator import build_default_generator
from .services.storage import SaveStore, build_default_store

sessions: Dict[str, GameSession] = {}
_store: Optional[SaveStore] = None


def default_factory() -> GameSession:
    global _store
    if _store is None:
        _store = build_default_store()
    return GameSession(build_default_generator(), _store)


session_factory: Callable[[], GameSession] = default_factory


def get_session(sid: str) -> GameSession:
    session = sessions.get(sid)
    if session is None:
        session = session_factory()
        sessions[sid] = session
    return session


def drop_session(sid: str) -> None:
    session = sessions.pop(sid, None)
    if session:
        session.back_to_menu()
