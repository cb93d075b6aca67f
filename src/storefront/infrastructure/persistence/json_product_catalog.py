"""JSON-file-backed implementation of ProductCatalog.

The file holds a list of objects with ``id``, ``name`` and ``price``
(number or string); ``description`` and ``image`` are optional. Every
price is in the storefront's single currency (USD). The file is read
once; the catalog is static for a session.
"""

from __future__ import annotations

import json
from pathlib import Path

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.product_catalog import ProductCatalog


class JsonProductCatalog(ProductCatalog):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._products = self._load()

    # --- ProductCatalog interface ---------------------------------------------

    def get_by_id(self, product_id: str) -> Product | None:
        return self._products.get(product_id)

    def list_all(self) -> list[Product]:
        return list(self._products.values())

    # --- Serialization helpers ------------------------------------------------

    def _load(self) -> dict[str, Product]:
        try:
            raw = json.loads(self._file_path.read_text(encoding="utf-8"))
        except OSError as exc:
            raise ValidationError(
                f"Cannot read catalog file {self._file_path}: {exc.strerror}"
            ) from exc
        if not isinstance(raw, list):
            raise ValidationError(
                f"Catalog file {self._file_path} must contain a JSON list"
            )
        products: dict[str, Product] = {}
        for position, item in enumerate(raw):
            try:
                product = Product(
                    id=str(item["id"]),
                    name=item["name"],
                    price=Money.of(item["price"]),
                    description=item.get("description", ""),
                    image=item.get("image", ""),
                )
            except (KeyError, TypeError, AttributeError) as exc:
                raise ValidationError(
                    f"Invalid catalog entry #{position} in {self._file_path}: {exc!r}"
                ) from exc
            products[product.id] = product
        return products
