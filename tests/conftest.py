import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
import sqlite3
import json

from recipe_finder.main import app
from recipe_finder.db import Base, get_db
from tests.factories import make_recipe

# --- Test Database Setup ---

from sqlalchemy.types import ARRAY
from sqlalchemy.dialects.postgresql import ARRAY as PG_ARRAY, JSONB
from sqlalchemy.ext.compiler import compiles

@compiles(ARRAY, 'sqlite')
@compiles(PG_ARRAY, 'sqlite')
def compile_array(element, compiler, **kw):
    return "JSON_ARRAY"

@compiles(JSONB, 'sqlite')
def compile_jsonb(element, compiler, **kw):
    return "JSON"

# Register adapters for SQLite to handle list/dict as JSON
sqlite3.register_adapter(list, json.dumps)
sqlite3.register_adapter(dict, json.dumps)
# Register converter for our custom type ONLY to avoid double-decoding standard JSON
sqlite3.register_converter("JSON_ARRAY", json.loads)

SQLALCHEMY_DATABASE_URL = "sqlite:///:memory:"

# check_same_thread is needed for SQLite; detect_types enables the converter.
engine = create_engine(
    SQLALCHEMY_DATABASE_URL,
    connect_args={
        "check_same_thread": False,
        "detect_types": sqlite3.PARSE_DECLTYPES
    },
    poolclass=StaticPool  # in-memory DB shared across sessions
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

def override_get_db():
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()

@pytest.fixture(autouse=True)
def setup_database():
    """Create tables before each test, drop after."""
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)

@pytest.fixture
def client():
    """Test client with DB override."""
    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()

@pytest.fixture
def db_session():
    """Direct database session for setup."""
    session = TestingSessionLocal()
    yield session
    session.close()


@pytest.fixture
def seed_recipes(db_session):
    """Small catalog covering the main matching cases."""
    recipes = [
        make_recipe(
            recipe_name="Onion Soup",
            ingredients=["2 tbsp olive oil", "1 onion, diced", "salt"],
            vegan=True,
            categories=["soup", "dinner"],
        ),
        make_recipe(
            recipe_name="Garlic Bread",
            ingredients=["1 baguette", "3 garlic cloves, minced", "50g butter"],
            categories=["side"],
        ),
        make_recipe(
            recipe_name="Tomato Salad",
            ingredients=["4 large tomatoes", "1 red onion (thinly sliced)", "2 tbsp olive oil", "salt", "pepper"],
            vegan=True,
            categories=["salad", "lunch"],
        ),
        make_recipe(
            recipe_name="Mystery Dish",
            ingredients=["2 tbsp", "1 cup"],
            categories=["dinner"],
        ),
    ]
    db_session.add_all(recipes)
    db_session.commit()
    for r in recipes:
        db_session.refresh(r)
    return recipes
