from typing import Any, Dict, List, Optional

from sqlalchemy.engine import Engine
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, select

from app.core.errors import DuplicateCategoryError
from app.models import Category, Product


class LocalCatalogStore:
    """Основное хранилище: SQLite через SQLModel"""

    name = "primary"

    def __init__(self, engine: Engine):
        self.engine = engine

    # === Categories ===

    def list_categories(self) -> List[Dict[str, Any]]:
        with Session(self.engine) as session:
            categories = session.exec(select(Category).order_by(Category.id)).all()
            return [category.model_dump() for category in categories]

    def create_category(self, name: str) -> Dict[str, Any]:
        with Session(self.engine) as session:
            category = Category(name=name)
            session.add(category)
            try:
                session.commit()
            except IntegrityError as exc:
                session.rollback()
                raise DuplicateCategoryError() from exc
            session.refresh(category)
            return {"id": category.id}

    def delete_category(self, category_id: int) -> None:
        with Session(self.engine) as session:
            category = session.get(Category, category_id)
            if category:
                session.delete(category)
                session.commit()

    # === Products ===

    def list_products(self, category: Optional[str] = None) -> List[Dict[str, Any]]:
        with Session(self.engine) as session:
            stmt = select(Product).order_by(Product.id.desc())
            if category:
                stmt = stmt.where(Product.category == category)
            return [product.model_dump() for product in session.exec(stmt).all()]

    def get_product(self, product_id: int) -> Optional[Dict[str, Any]]:
        with Session(self.engine) as session:
            product = session.get(Product, product_id)
            return product.model_dump() if product else None

    def create_product(self, data: Dict[str, Any]) -> int:
        with Session(self.engine) as session:
            product = Product(**data)
            session.add(product)
            session.commit()
            session.refresh(product)
            return product.id

    def update_product(self, product_id: int, data: Dict[str, Any]) -> None:
        # Полная замена: в data все поля, отсутствующие уже приведены к None
        with Session(self.engine) as session:
            product = session.get(Product, product_id)
            if not product:
                return
            for key, value in data.items():
                setattr(product, key, value)
            session.add(product)
            session.commit()

    def delete_product(self, product_id: int) -> None:
        with Session(self.engine) as session:
            product = session.get(Product, product_id)
            if product:
                session.delete(product)
                session.commit()

    def close(self) -> None:
        self.engine.dispose()
