import logging
from typing import Tuple

from sqlalchemy.engine import Engine
from sqlmodel import SQLModel, Session, select, func

from app.models import Category, Product

logger = logging.getLogger(__name__)


SEED_CATEGORIES = [
    "New Arrivals",
    "Plastic Chair",
    "Lounge Series",
    "Office Essential",
]

SEED_PRODUCTS = [
    {
        "name": "Elegance Lounge Chair",
        "description": "Premium velvet finish with ergonomic support.",
        "price": 12500,
        "category": "Lounge Series",
        "image_url": "https://picsum.photos/seed/chair1/800/600",
        "origin": "Indonesia",
    },
    {
        "name": "Modern Plastic Stool",
        "description": "Durable, stackable, and weather-resistant plastic.",
        "price": 850,
        "category": "Plastic Chair",
        "image_url": "https://picsum.photos/seed/stool/800/600",
        "origin": "China",
    },
    {
        "name": "Teak Wood Dining Table",
        "description": "Solid teak wood with a natural finish.",
        "price": 45000,
        "category": "New Arrivals",
        "image_url": "https://picsum.photos/seed/table/800/600",
        "origin": "Indonesia",
    },
    {
        "name": "Minimalist Office Chair",
        "description": "Sleek design with adjustable height.",
        "price": 8500,
        "category": "Office Essential",
        "image_url": "https://picsum.photos/seed/office/800/600",
        "origin": "China",
    },
]


def create_tables(engine: Engine) -> None:
    """Создание всех таблиц"""
    SQLModel.metadata.create_all(engine)


def seed_catalog(engine: Engine) -> Tuple[int, int]:
    """
    Заполнение пустых таблиц начальными данными.
    Каждая таблица проверяется отдельно. Возвращает (категорий, товаров) добавлено.
    """
    categories_added = 0
    products_added = 0

    with Session(engine) as session:
        if session.exec(select(func.count()).select_from(Category)).one() == 0:
            for name in SEED_CATEGORIES:
                session.add(Category(name=name))
                # flush по одной, чтобы id шли в порядке списка
                session.flush()
            categories_added = len(SEED_CATEGORIES)

        if session.exec(select(func.count()).select_from(Product)).one() == 0:
            for data in SEED_PRODUCTS:
                session.add(Product(**data))
                session.flush()
            products_added = len(SEED_PRODUCTS)

        session.commit()

    return categories_added, products_added


def init_db(engine: Engine) -> None:
    create_tables(engine)
    categories_added, products_added = seed_catalog(engine)
    if categories_added or products_added:
        logger.info(
            "Seeded catalog: %d categories, %d products",
            categories_added,
            products_added,
        )
