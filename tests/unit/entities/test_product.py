"""Product entity, table and repository tests.

Repository tests run against an in-memory SQLite database.
"""

import pytest
from pydantic import ValidationError
from sqlmodel import Session, select

from src.catalog.core.exceptions import ConcurrentModificationError
from src.catalog.entities.service.product import (
    Product,
    ProductRepository,
    ProductTable,
)


class TestProductEntity:
    """Test Product domain entity."""

    def test_product_creation(self):
        product = Product(name="New", price=5, description="")

        assert product.id is None  # Assigned by the store
        assert product.name == "New"
        assert product.price == 5.0
        assert product.description == ""

    def test_description_is_optional(self):
        product = Product(name="Widget", price=9.99)

        assert product.description is None

    def test_name_is_required(self):
        with pytest.raises(ValidationError):
            Product(price=1.0)

    def test_price_is_required(self):
        with pytest.raises(ValidationError):
            Product(name="Widget")

    @pytest.mark.parametrize("name", ["", "   "])
    def test_blank_name_is_rejected(self, name):
        with pytest.raises(ValidationError, match="name must not be blank"):
            Product(name=name, price=1.0)

    def test_negative_price_is_allowed(self):
        assert Product(name="Refund", price=-1.0).price == -1.0

    def test_product_equality(self):
        p1 = Product(id=1, name="Widget", price=9.99)
        p2 = Product(id=1, name="Widget", price=9.99)
        p3 = Product(id=1, name="Widget", price=10.99)

        assert p1 == p2
        assert hash(p1) == hash(p2)
        assert p1 != p3

    @pytest.mark.parametrize(
        "term,expected",
        [("WID", True), ("blue", True), ("BLUE", True), ("gadget", False)],
    )
    def test_matches(self, term, expected):
        product = Product(id=1, name="Widget", price=9.99, description="Blue one")

        assert product.matches(term) is expected

    def test_matches_without_description(self):
        assert Product(name="Widget", price=1).matches("none") is False


class TestProductRepository:
    """Test the ProductRepository against a real database."""

    def test_create_assigns_id(self, product_repository: ProductRepository, session: Session):
        created = product_repository.create(Product(name="New", price=5, description=""))
        session.commit()

        assert created.id is not None
        assert isinstance(created, Product)
        assert not isinstance(created, ProductTable)

    def test_create_ignores_payload_id(self, product_repository: ProductRepository, product_rows):
        created = product_repository.create(Product(id=1, name="Dup", price=1))

        assert created.id not in {row.id for row in product_rows}

    def test_create_sets_audit_timestamps(self, product_repository: ProductRepository, session: Session):
        created = product_repository.create(Product(name="Stamped", price=1))
        session.commit()

        row = session.get(ProductTable, created.id)
        assert row.created_at is not None
        assert row.updated_at is not None

    def test_get(self, product_repository: ProductRepository, product_rows):
        widget = product_rows[0]

        result = product_repository.get(widget.id)

        assert result == Product(id=widget.id, name="Widget", price=9.99)

    def test_get_not_found(self, product_repository: ProductRepository):
        assert product_repository.get(999) is None

    def test_exists(self, product_repository: ProductRepository, product_rows):
        assert product_repository.exists(product_rows[0].id) is True
        assert product_repository.exists(999) is False

    def test_list_all_is_ordered_by_id(self, product_repository: ProductRepository, insert_products):
        insert_products(("C", 3.0, None), ("A", 1.0, None), ("B", 2.0, None))

        ids = [p.id for p in product_repository.list_all()]

        assert ids == sorted(ids)
        assert len(ids) == 3

    def test_list_all_empty(self, product_repository: ProductRepository):
        assert product_repository.list_all() == []

    def test_update_replaces_mutable_fields(
        self, product_repository: ProductRepository, product_rows, session: Session
    ):
        widget_id = product_rows[0].id

        updated = product_repository.update(
            Product(id=widget_id, name="Widget v2", price=11.5, description=None)
        )
        session.commit()

        assert updated.name == "Widget v2"
        stored = product_repository.get(widget_id)
        assert stored == Product(id=widget_id, name="Widget v2", price=11.5)

    def test_update_missing_row_raises_concurrent_modification(
        self, product_repository: ProductRepository
    ):
        with pytest.raises(ConcurrentModificationError) as exc_info:
            product_repository.update(Product(id=42, name="Ghost", price=1))

        assert exc_info.value.product_id == 42

    def test_delete(self, product_repository: ProductRepository, product_rows, session: Session):
        widget_id = product_rows[0].id

        assert product_repository.delete(widget_id) is True
        session.commit()

        assert product_repository.get(widget_id) is None
        remaining = session.exec(select(ProductTable)).all()
        assert [row.name for row in remaining] == ["Gadget"]

    def test_delete_missing_returns_false(self, product_repository: ProductRepository):
        assert product_repository.delete(999) is False
