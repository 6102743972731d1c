import datetime

from peewee import *
from playhouse.pool import PooledSqliteDatabase

# Base initialisée par create_app() (voir db.init)
db = PooledSqliteDatabase(None)

class BaseModel(Model):
    class Meta:
        database = db

class Sale(BaseModel):
    """Commande validée et payable : écrite une seule fois, jamais modifiée.

    Les montants sont stockés en **centimes** (int), comme le faisait
    `shipping_price` ; le taux de taxe reste en décimal.
    """
    name = CharField()
    address = CharField()
    city = CharField()
    province = CharField()
    phone_number = CharField()
    email = CharField()
    apples = IntegerField()
    bananas = IntegerField()
    tax_rate = DecimalField(max_digits=6, decimal_places=5)
    subtotal = IntegerField()
    tax = IntegerField()
    total = IntegerField()
    created_at = DateTimeField(default=datetime.datetime.now)

    def save(self, *args, **kwargs):
        if self._pk is not None and not kwargs.get("force_insert"):
            raise ValueError("A recorded sale cannot be modified")
        return super().save(*args, **kwargs)

def create_tables():
    with db.connection_context():
        db.create_tables([Sale])
