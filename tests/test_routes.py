from fruitstand.models import Sale, db


def test_get_root_returns_form(client):
    resp = client.get("/")
    assert resp.status_code == 200
    body = resp.get_data(as_text=True)
    assert 'action="/submit-form"' in body
    assert 'name="phoneNumber"' in body
    assert "<option value=\"Quebec\">Quebec</option>" in body


def test_submit_form_returns_receipt(client, valid_form):
    resp = client.post("/submit-form", data=valid_form)
    assert resp.status_code == 200
    assert resp.mimetype == "text/html"

    body = resp.get_data(as_text=True)
    assert "<p>Name: Jane Doe</p>" in body
    assert "<p>Email: jane@example.com</p>" in body
    assert "<p>Phone Number: 555-555-5555</p>" in body
    assert "<p>Address: 12 Main Street, Toronto, Ontario</p>" in body
    assert "<p>Apples Purchased @ $3: 2 - $6.00</p>" in body
    assert "<p>Bananas Purchased @ $2: 3 - $6.00</p>" in body
    assert "<p>Subtotal: $12.00</p>" in body
    assert "<p>Sales Tax (13.00%): $1.56</p>" in body
    assert "<p>Total Cost: $13.56</p>" in body

    with db.connection_context():
        assert Sale.select().count() == 1
        assert Sale.get().total == 1356


def test_receipt_omits_fruit_not_bought(client, valid_form):
    body = client.post("/submit-form", data=dict(valid_form, apples="0", bananas="5")).get_data(as_text=True)
    assert "Apples Purchased" not in body
    assert "<p>Bananas Purchased @ $2: 5 - $10.00</p>" in body


def test_unknown_province_receipt_has_no_tax(client, valid_form):
    body = client.post("/submit-form", data=dict(valid_form, province="Atlantis")).get_data(as_text=True)
    assert "<p>Sales Tax (0.00%): $0.00</p>" in body
    assert "<p>Total Cost: $12.00</p>" in body


def test_receipt_escapes_html(client, valid_form):
    body = client.post("/submit-form", data=dict(valid_form, name="<b>Jane</b>")).get_data(as_text=True)
    assert "<b>Jane</b>" not in body
    assert "&lt;b&gt;Jane&lt;/b&gt;" in body


def test_submit_form_lists_errors(client, valid_form):
    resp = client.post("/submit-form", data=dict(valid_form, apples="0", bananas="0", email="nope"))
    assert resp.status_code == 200
    body = resp.get_data(as_text=True)
    assert body.strip() == (
        "<ul><li>Invalid Email Address format.</li>"
        "<li>At least one of Apples or Bananas quantity must be greater than 0.</li></ul>"
        '<a href="/">Go back</a>'
    )
    with db.connection_context():
        assert Sale.select().count() == 0


def test_submit_form_minimum_purchase(client, valid_form):
    resp = client.post("/submit-form", data=dict(valid_form, apples="1", bananas="1"))
    assert resp.status_code == 200
    assert resp.mimetype == "text/plain"
    assert resp.get_data(as_text=True) == "Minimum purchase should be $10."


def test_submit_form_persistence_failure(client, valid_form, monkeypatch):
    from peewee import OperationalError

    def boom(**_kwargs):
        raise OperationalError("database is locked")

    monkeypatch.setattr(Sale, "create", boom)
    resp = client.post("/submit-form", data=valid_form)

    assert resp.status_code == 500
    body = resp.get_data(as_text=True)
    assert body == "Internal server error"
    assert "locked" not in body
    assert "Jane" not in body
    assert db.is_closed()


def test_unknown_route_is_plain_404(client):
    resp = client.get("/nope")
    assert resp.status_code == 404
    assert resp.get_data(as_text=True) == "Not found"
