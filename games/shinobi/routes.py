# games/shinobi/routes.py
from flask import Blueprint, jsonify

from .content.characters import CHARACTERS
from .content.events import RANDOM_EVENTS
from .content.items import ITEMS
from .content.skills import SKILLS

shinobi_bp = Blueprint("shinobi", __name__)


@shinobi_bp.route("/shinobi/catalog")
def shinobi_catalog():
    return jsonify({
        "characters": CHARACTERS,
        "skills": SKILLS,
        "items": ITEMS,
        "events": RANDOM_EVENTS,
    })
