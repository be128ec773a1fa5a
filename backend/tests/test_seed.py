from fastapi.testclient import TestClient
from sqlmodel import Session, select, func

from app.db.init_db import SEED_CATEGORIES, create_tables, seed_catalog
from app.db.session import make_engine
from app.main import create_app
from app.models import Category, Product


def count_rows(settings):
    engine = make_engine(settings.DATABASE_URL)
    with Session(engine) as session:
        categories = session.exec(select(func.count()).select_from(Category)).one()
        products = session.exec(select(func.count()).select_from(Product)).one()
    engine.dispose()
    return categories, products


def test_startup_seeds_empty_store(client, settings):
    assert count_rows(settings) == (4, 4)

    names = [c["name"] for c in client.get("/api/categories").json()]
    assert names == SEED_CATEGORIES


def test_restart_does_not_reseed(settings):
    with TestClient(create_app(settings)):
        pass
    with TestClient(create_app(settings)):
        pass
    assert count_rows(settings) == (4, 4)


def test_seed_checks_each_table_separately(settings):
    engine = make_engine(settings.DATABASE_URL)
    create_tables(engine)
    with Session(engine) as session:
        session.add(Category(name="Outdoor"))
        session.commit()

    assert seed_catalog(engine) == (0, 4)
    assert seed_catalog(engine) == (0, 0)
    engine.dispose()

    assert count_rows(settings) == (1, 4)


def test_seed_products_listed_newest_first(client):
    names = [p["name"] for p in client.get("/api/products").json()]
    assert names == [
        "Minimalist Office Chair",
        "Teak Wood Dining Table",
        "Modern Plastic Stool",
        "Elegance Lounge Chair",
    ]


def test_seed_script(monkeypatch, capsys, settings):
    from app.scripts import seed_catalog as script

    monkeypatch.setenv("DATABASE_URL", settings.DATABASE_URL)
    script.main()
    assert "Added 4 categories, 4 products" in capsys.readouterr().out

    script.main()
    assert "Catalog already seeded" in capsys.readouterr().out
    assert count_rows(settings) == (4, 4)
