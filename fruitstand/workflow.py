"""fruitstand.workflow – traitement d'une soumission du formulaire

Machine à états linéaire, sans reprise :

    RECEIVED → VALIDATED → PRICED_AND_CHECKED → PERSISTED → RENDERED

avec trois sorties terminales : REJECTED_INVALID, REJECTED_MINIMUM et
PERSIST_FAILED. Une seule tentative d'enregistrement par soumission.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import Mapping

from . import presenter
from .errors import MinimumPurchaseError, PersistenceError, ValidationError
from .order_store import OrderStore
from .pricing import check_minimum_purchase, compute_subtotal, compute_total
from .validation import OrderInput, validate_order

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Internal server error"


class OrderState(enum.Enum):
    RECEIVED = "received"
    VALIDATED = "validated"
    PRICED_AND_CHECKED = "priced-and-checked"
    PERSISTED = "persisted"
    RENDERED = "rendered"
    REJECTED_INVALID = "rejected-invalid"
    REJECTED_MINIMUM = "rejected-minimum"
    PERSIST_FAILED = "persist-failed"


@dataclass(frozen=True)
class SubmissionResult:
    state: OrderState
    body: str
    status: int = 200
    mimetype: str = "text/html"


def _enter(state: OrderState) -> OrderState:
    logger.debug("submission -> %s", state.value)
    return state


def process_submission(form: Mapping[str, str], store: OrderStore) -> SubmissionResult:
    _enter(OrderState.RECEIVED)

    # 1️⃣ validation des champs
    try:
        order = validate_order(OrderInput.from_form(form))
    except ValidationError as err:
        state = _enter(OrderState.REJECTED_INVALID)
        return SubmissionResult(state, presenter.render_errors(err.messages))
    _enter(OrderState.VALIDATED)

    # 2️⃣ achat minimum, puis taxes
    subtotal = compute_subtotal(order.apples, order.bananas)
    try:
        check_minimum_purchase(subtotal)
    except MinimumPurchaseError as err:
        state = _enter(OrderState.REJECTED_MINIMUM)
        return SubmissionResult(state, str(err), mimetype="text/plain")
    pricing = compute_total(subtotal, order.province)
    _enter(OrderState.PRICED_AND_CHECKED)

    # 3️⃣ enregistrement : le détail reste dans les logs, jamais dans la réponse
    try:
        store.save(order, pricing)
    except PersistenceError:
        logger.exception("Sale could not be persisted")
        state = _enter(OrderState.PERSIST_FAILED)
        return SubmissionResult(state, INTERNAL_ERROR_MESSAGE, status=500, mimetype="text/plain")
    _enter(OrderState.PERSISTED)

    state = _enter(OrderState.RENDERED)
    return SubmissionResult(state, presenter.render_receipt(order, pricing))
