"""
Discount resolver applied at checkout.

Resolution happens in two phases. ``quote`` validates the promotion code and
the points request and computes the amounts without touching anything.
``commit`` then consumes the single-use promotion and debits the points,
each with a conditional write, so a concurrent request that got there first
turns this one into the same failure a plain invalid request would see.
Call both inside one transaction (``resolve`` does) so a failure in the
second mutation rolls back the first.
"""
import logging
from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP
from typing import Optional

from django.db import transaction
from django.utils import timezone

from apps.common.exceptions import (
    InvalidOrExpiredPromotion, MinimumOrderNotMet, InsufficientPoints
)
from apps.points.services import PointsService
from ..models import Promotion
from .promotion_service import PromotionService

logger = logging.getLogger(__name__)

CENT = Decimal('0.01')

SOURCE_NONE = 'none'
SOURCE_PROMOTION = 'promotion'
SOURCE_POINTS = 'points'
SOURCE_BOTH = 'promotion+points'


def to_money(value) -> Decimal:
    return Decimal(str(value)).quantize(CENT, rounding=ROUND_HALF_UP)


@dataclass(frozen=True)
class DiscountQuote:
    order_total: Decimal
    final_amount: Decimal
    discount_amount: Decimal
    applied_code: Optional[str] = None
    source: str = SOURCE_NONE
    promotion_id: Optional[int] = None
    single_use: bool = False
    points_redeemed: int = 0

    def as_dict(self):
        return {
            'order_total': str(self.order_total),
            'final_amount': str(self.final_amount),
            'discount_amount': str(self.discount_amount),
            'applied_code': self.applied_code,
            'source': self.source,
            'points_redeemed': self.points_redeemed,
        }


class DiscountResolver:
    """Promotion code first, then loyalty points, floored at zero"""

    @staticmethod
    def promotion_discount(promotion: Promotion, order_total: Decimal) -> Decimal:
        if promotion.discount_type == Promotion.TYPE_PERCENT:
            return to_money(order_total * promotion.discount / Decimal('100'))
        return to_money(promotion.discount)

    @staticmethod
    def quote(order_total, user_id, promotion_code=None, points_to_redeem=None, now=None) -> DiscountQuote:
        order_total = to_money(order_total)
        discount_amount = Decimal('0.00')
        promotion = None
        points = int(points_to_redeem or 0)

        if promotion_code:
            promotion = PromotionService.find_applicable(promotion_code, user_id, now or timezone.now())
            if promotion is None:
                raise InvalidOrExpiredPromotion()
            if order_total < promotion.min_order_value:
                raise MinimumOrderNotMet(
                    f'Order total {order_total} is below the minimum {promotion.min_order_value} for this promotion',
                    order_total=str(order_total),
                    min_order_value=str(promotion.min_order_value),
                )
            discount_amount += DiscountResolver.promotion_discount(promotion, order_total)

        if points > 0:
            balance = PointsService.get_points(user_id)
            if balance < points:
                raise InsufficientPoints(
                    f'Not enough points: requested {points}, available {balance}',
                    requested=points,
                    available=balance,
                )
            discount_amount += Decimal(points)
        else:
            points = 0

        if promotion and points:
            source = SOURCE_BOTH
        elif promotion:
            source = SOURCE_PROMOTION
        elif points:
            source = SOURCE_POINTS
        else:
            source = SOURCE_NONE

        final_amount = max(Decimal('0.00'), order_total - discount_amount)
        return DiscountQuote(
            order_total=order_total,
            final_amount=to_money(final_amount),
            discount_amount=to_money(discount_amount),
            applied_code=promotion.code if promotion else None,
            source=source,
            promotion_id=promotion.id if promotion else None,
            single_use=bool(promotion and promotion.is_single_use),
            points_redeemed=points,
        )

    @staticmethod
    def commit(quote: DiscountQuote, user_id, reference_id=None) -> None:
        """Apply the side effects of a quote; must run inside the caller's transaction"""
        if quote.single_use:
            if not PromotionService.delete_by_id(quote.promotion_id):
                logger.warning(f"Single-use promotion {quote.applied_code} already consumed")
                raise InvalidOrExpiredPromotion()
            logger.info(f"Consumed single-use promotion {quote.applied_code} for user {user_id}")

        if quote.points_redeemed:
            PointsService.debit(
                user_id,
                quote.points_redeemed,
                description=f'Redeemed for {quote.points_redeemed} discount',
                reference_id=reference_id,
            )

    @staticmethod
    @transaction.atomic
    def resolve(order_total, user_id, promotion_code=None, points_to_redeem=None,
                reference_id=None, now=None) -> DiscountQuote:
        quote = DiscountResolver.quote(order_total, user_id, promotion_code, points_to_redeem, now)
        DiscountResolver.commit(quote, user_id, reference_id)
        return quote
