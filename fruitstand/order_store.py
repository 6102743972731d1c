"""
fruitstand/order_store.py
-------------------------

Enregistrement des ventes validées.

• Une seule connexion du pool par appel à `save`, rendue au pool à la sortie
  du bloc `connection_context()`, y compris en cas d'erreur.
• L'attente est bornée : DB_POOL_TIMEOUT pour obtenir une connexion,
  busy_timeout SQLite pour un verrou. Un dépassement devient PersistenceError.
"""

from __future__ import annotations

import logging

from peewee import Database, PeeweeException
from playhouse.pool import MaxConnectionsExceeded

from .errors import PersistenceError
from .models import Sale, db
from .pricing import PricingResult, to_cents
from .validation import ValidatedOrder

logger = logging.getLogger(__name__)


class OrderStore:
    def __init__(self, database: Database = db):
        self.database = database

    def save(self, order: ValidatedOrder, pricing: PricingResult) -> Sale:
        """Insère la vente ; lève PersistenceError si la base ne suit pas.

        La cause d'origine reste accessible via `err.__cause__`.
        """
        try:
            with self.database.connection_context():
                with self.database.atomic():
                    sale = Sale.create(
                        name=order.name,
                        address=order.address,
                        city=order.city,
                        province=order.province,
                        phone_number=order.phone_number,
                        email=order.email,
                        apples=order.apples,
                        bananas=order.bananas,
                        tax_rate=pricing.tax_rate,
                        subtotal=to_cents(pricing.subtotal),
                        tax=to_cents(pricing.tax),
                        total=to_cents(pricing.total),
                    )
        except (PeeweeException, MaxConnectionsExceeded, OverflowError) as exc:
            # OverflowError : entier trop grand pour une colonne INTEGER SQLite
            raise PersistenceError("Could not record sale") from exc

        logger.info("Sale %s recorded", sale.id)
        return sale
