"""
Seed-скрипт: создание таблиц и начального каталога, если таблицы пустые
Запуск: python -m app.scripts.seed_catalog
"""
from app.core.config import Settings
from app.db.init_db import create_tables, seed_catalog
from app.db.session import make_engine


def main():
    settings = Settings()
    engine = make_engine(settings.DATABASE_URL)

    print("Creating tables...")
    create_tables(engine)

    print("Seeding catalog...")
    categories_added, products_added = seed_catalog(engine)
    if not categories_added and not products_added:
        print("Catalog already seeded, nothing to do")
    else:
        print(f"Added {categories_added} categories, {products_added} products")
    print("Done!")


if __name__ == "__main__":
    main()
