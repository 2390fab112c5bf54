# games/shinobi/__init__.py
from .routes import shinobi_bp
from .sockets import register_shinobi_socket_handlers


def init_shinobi(app, socketio):
    app.register_blueprint(shinobi_bp)
    register_shinobi_socket_handlers(socketio)
