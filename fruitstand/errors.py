"""Exceptions métier du comptoir de fruits."""


class FruitstandError(Exception):
    """Racine de toutes les erreurs levées par le paquet."""


class ValidationError(FruitstandError):
    """Un ou plusieurs champs du formulaire sont invalides.

    Les messages (dans l'ordre des règles) sont dans `err.messages`.
    """

    def __init__(self, messages):
        super().__init__("; ".join(messages))
        self.messages = list(messages)


class MinimumPurchaseError(FruitstandError):
    """Le sous-total n'atteint pas l'achat minimum."""


class PersistenceError(FruitstandError):
    """L'enregistrement de la vente a échoué (base, pool, verrou)."""
