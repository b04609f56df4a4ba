"""
Cart store used by the storefront and by checkout.
"""
from dataclasses import dataclass
from decimal import Decimal
from typing import List, Optional

from django.db import transaction

from apps.common.exceptions import NotFound, OutOfStock, ShopError
from apps.products.models import Product
from ..models import Cart, CartItem


@dataclass(frozen=True)
class CartLine:
    """A cart line frozen at checkout time, unit price included"""
    product_id: int
    product_name: str
    quantity: int
    unit_price: Decimal

    @property
    def line_total(self) -> Decimal:
        return self.unit_price * self.quantity


class CartService:
    """Service for cart operations"""

    @staticmethod
    def find_cart_for_user(user) -> Optional[Cart]:
        return Cart.objects.filter(user=user).prefetch_related('items__product').first()

    @staticmethod
    def lock_cart(user) -> Optional[Cart]:
        """Row-lock the user's cart until the surrounding transaction ends"""
        return Cart.objects.select_for_update().filter(user=user).first()

    @staticmethod
    def snapshot(user) -> List[CartLine]:
        """Freeze the cart into lines carrying the price seen right now"""
        items = CartItem.objects.filter(cart__user=user).select_related('product')
        return [
            CartLine(
                product_id=item.product_id,
                product_name=item.product.name,
                quantity=item.quantity,
                unit_price=item.product.price,
            )
            for item in items
        ]

    @staticmethod
    @transaction.atomic
    def add_item(user, product_id, quantity) -> Cart:
        if quantity <= 0:
            raise ShopError('Quantity must be greater than 0')

        product = Product.objects.filter(pk=product_id).first()
        if product is None:
            raise NotFound(f'Product {product_id} not found')

        cart, _ = Cart.objects.get_or_create(user=user)
        item = CartItem.objects.select_for_update().filter(cart=cart, product=product).first()
        new_quantity = quantity + (item.quantity if item else 0)

        if product.stock_quantity < new_quantity:
            raise OutOfStock(product.id, new_quantity, product.stock_quantity, product.name)

        if item:
            item.quantity = new_quantity
            item.save(update_fields=['quantity'])
        else:
            CartItem.objects.create(cart=cart, product=product, quantity=quantity)

        cart.save(update_fields=['updated_at'])
        return cart

    @staticmethod
    def remove_item(user, product_id) -> Cart:
        cart = Cart.objects.filter(user=user).first()
        if cart is None:
            raise NotFound('Cart not found')
        cart.items.filter(product_id=product_id).delete()
        cart.save(update_fields=['updated_at'])
        return cart

    @staticmethod
    def clear_cart(user) -> None:
        CartItem.objects.filter(cart__user=user).delete()
