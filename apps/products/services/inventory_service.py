"""
Inventory ledger.

Stock is never read and then written back. ``reserve`` issues one
conditional UPDATE per line (decrement only while stock >= quantity), so two
checkouts racing for the last unit cannot both succeed. Callers run
``reserve`` inside ``transaction.atomic()`` so a failing line rolls back the
lines already decremented.
"""
import logging
from dataclasses import dataclass
from typing import Iterable

from django.db.models import Case, F, Value, When

from apps.common.exceptions import OutOfStock, NotFound
from ..models import Product

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StockLine:
    product_id: int
    quantity: int


class InventoryService:
    """Per-product stock adjustments"""

    @staticmethod
    def get_stock(product_id) -> int:
        stock = Product.objects.filter(pk=product_id).values_list('stock_quantity', flat=True).first()
        if stock is None:
            raise NotFound(f'Product {product_id} not found')
        return stock

    @staticmethod
    def adjust_stock(product_id, delta) -> bool:
        """Add ``delta`` to the stock unless the result would be negative"""
        queryset = Product.objects.filter(pk=product_id)
        if delta < 0:
            queryset = queryset.filter(stock_quantity__gte=-delta)
        return queryset.update(stock_quantity=F('stock_quantity') + delta) == 1

    @staticmethod
    def reserve(lines: Iterable[StockLine]) -> None:
        """Decrement stock for every line or raise OutOfStock"""
        for line in lines:
            updated = Product.objects.filter(
                pk=line.product_id,
                stock_quantity__gte=line.quantity,
            ).update(
                stock_quantity=F('stock_quantity') - line.quantity,
                purchase_count=F('purchase_count') + line.quantity,
            )
            if updated:
                continue

            product = Product.objects.filter(pk=line.product_id).only('name', 'stock_quantity').first()
            if product is None:
                raise NotFound(f'Product {line.product_id} not found')
            logger.warning(
                f"Out of stock for product {line.product_id}: "
                f"requested {line.quantity}, available {product.stock_quantity}"
            )
            raise OutOfStock(line.product_id, line.quantity, product.stock_quantity, product.name)

    @staticmethod
    def restore(lines: Iterable[StockLine]) -> None:
        """Give back exactly what ``reserve`` took for these lines"""
        for line in lines:
            Product.objects.filter(pk=line.product_id).update(
                stock_quantity=F('stock_quantity') + line.quantity,
                purchase_count=Case(
                    When(purchase_count__gte=line.quantity, then=F('purchase_count') - line.quantity),
                    default=Value(0),
                ),
            )
