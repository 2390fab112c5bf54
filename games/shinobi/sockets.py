# games/shinobi/sockets.py
from flask import request
from flask_socketio import emit

from . import state
from .engine.models import REJECTED


def _field(payload, key):
    # clients may send either {"key": value} or the bare value
    if isinstance(payload, dict):
        return payload.get(key)
    return payload


def _reply(session, result=None):
    if result and result.get("signal") == REJECTED:
        emit("shinobi_system", result.get("log") or "Action rejected.")
    emit("shinobi_snapshot", session.snapshot())


def register_shinobi_socket_handlers(socketio):
    @socketio.on("shinobi_select")
    def shinobi_select(payload):
        session = state.get_session(request.sid)
        character_id = str(_field(payload, "character_id") or "").strip()
        _reply(session, session.select_character(character_id))

    @socketio.on("shinobi_skill")
    def shinobi_skill(payload):
        session = state.get_session(request.sid)
        skill_id = str(_field(payload, "skill_id") or "").strip()
        result = session.begin_skill(skill_id)
        if result["signal"] != REJECTED and not result.get("cue"):
            # nothing to play: resolve straight away
            result = session.resolve_action()
        _reply(session, result)

    @socketio.on("shinobi_resolve")
    def shinobi_resolve(payload=None):
        session = state.get_session(request.sid)
        _reply(session, session.resolve_action())

    @socketio.on("shinobi_item")
    def shinobi_item(payload):
        session = state.get_session(request.sid)
        item_id = str(_field(payload, "item_id") or "").strip()
        _reply(session, session.use_item(item_id))

    @socketio.on("shinobi_upgrade")
    def shinobi_upgrade(payload):
        session = state.get_session(request.sid)
        skill_id = str(_field(payload, "skill_id") or "").strip()
        _reply(session, session.upgrade_skill(skill_id))

    @socketio.on("shinobi_shop_open")
    def shinobi_shop_open(payload=None):
        session = state.get_session(request.sid)
        _reply(session, session.open_shop())

    @socketio.on("shinobi_buy")
    def shinobi_buy(payload):
        session = state.get_session(request.sid)
        item_id = str(_field(payload, "item_id") or "").strip()
        _reply(session, session.buy_item(item_id))

    @socketio.on("shinobi_shop_close")
    def shinobi_shop_close(payload=None):
        session = state.get_session(request.sid)
        _reply(session, session.close_shop())

    @socketio.on("shinobi_event")
    def shinobi_event(payload):
        session = state.get_session(request.sid)
        index = _field(payload, "index")
        try:
            index = int(index)
        except (TypeError, ValueError):
            # out of range, so the session rejects it like any other bad choice
            index = -1
        _reply(session, session.choose_event_option(index))

    @socketio.on("shinobi_image")
    def shinobi_image(payload):
        session = state.get_session(request.sid)
        image_url = str(_field(payload, "image_url") or "").strip()
        _reply(session, session.change_image(image_url))

    @socketio.on("shinobi_menu")
    def shinobi_menu(payload=None):
        session = state.get_session(request.sid)
        _reply(session, session.back_to_menu())

    @socketio.on("disconnect")
    def shinobi_disconnect(reason=None):
        state.drop_session(request.sid)
