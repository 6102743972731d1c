"""fruitstand.routes – formulaire et soumission des commandes

Réponses en fragments HTML (reçu ou liste d'erreurs), sauf l'avis d'achat
minimum et l'erreur d'enregistrement qui sont en texte brut.
"""

from __future__ import annotations

from flask import Blueprint, Response, current_app, render_template, request

from .pricing import TAX_RATES
from .workflow import process_submission

# ---------------------------------------------------------------------------
# Blueprint
# ---------------------------------------------------------------------------
shop_bp = Blueprint("shop", __name__)

# ---------------------------------------------------------------------------
# GET / – formulaire de commande
# ---------------------------------------------------------------------------
@shop_bp.route("/", methods=["GET"])
def order_form():
    return render_template("index.html", provinces=list(TAX_RATES))

# ---------------------------------------------------------------------------
# POST /submit-form – validation, calcul, enregistrement, reçu
# ---------------------------------------------------------------------------
@shop_bp.route("/submit-form", methods=["POST"])
def submit_form():
    store = current_app.extensions["order_store"]
    result = process_submission(request.form, store)
    return Response(result.body, status=result.status, mimetype=result.mimetype)
