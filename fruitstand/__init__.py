from flask import Flask

from .models import db
from .order_store import OrderStore
from .utils import setup_logging
import click

def create_app(config_overrides=None):
    app = Flask(__name__)

    app.config.from_object("config.config")
    if config_overrides:
        app.config.update(config_overrides)

    setup_logging(app.config["LOG_LEVEL"], app.config.get("LOG_FILE"))

    # --- Pool de connexions : une connexion par enregistrement (OrderStore) ---
    if not db.deferred:
        db.close_all()
    db.init(
        str(app.config["DATABASE"]),
        max_connections=app.config["DB_MAX_CONNECTIONS"],
        stale_timeout=app.config["DB_STALE_TIMEOUT"],
        timeout=app.config["DB_POOL_TIMEOUT"],
        pragmas=[("busy_timeout", app.config["DB_BUSY_TIMEOUT_MS"])],
        check_same_thread=False,
    )
    app.extensions["order_store"] = OrderStore(db)

    # --- Blueprints ---
    from .routes import shop_bp
    app.register_blueprint(shop_bp)

    # ---------- Handlers d’erreurs globaux ----------
    @app.errorhandler(404)
    def not_found(err):
        return "Not found", 404, {"Content-Type": "text/plain; charset=utf-8"}

    @app.errorhandler(500)
    def internal_error(err):
        return "Internal server error", 500, {"Content-Type": "text/plain; charset=utf-8"}
    # ------------------------------------------------

    # --- Commande init-db ---
    @app.cli.command("init-db")
    def init_db():
        from .models import create_tables
        create_tables()
        click.echo("Database initialised.")

    return app
