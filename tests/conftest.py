import pytest
from fruitstand import create_app
from fruitstand.models import db, create_tables

@pytest.fixture
def app(tmp_path):
    app = create_app({
        "DATABASE": tmp_path / "test.db",
        "TESTING": True,
    })
    create_tables()
    yield app
    db.close_all()

@pytest.fixture
def client(app):
    with app.test_client() as client:
        yield client

@pytest.fixture
def runner(app):
    return app.test_cli_runner()

@pytest.fixture
def valid_form():
    return {
        "name": "Jane Doe",
        "address": "12 Main Street",
        "city": "Toronto",
        "province": "Ontario",
        "phoneNumber": "555-555-5555",
        "email": "jane@example.com",
        "apples": "2",
        "bananas": "3",
    }
