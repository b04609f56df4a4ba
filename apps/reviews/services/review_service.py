"""
Reviews, comments and the reward handed out for a rated review.
"""
import logging
import random
import time
from datetime import timedelta
from decimal import Decimal

from django.conf import settings
from django.db import IntegrityError, transaction
from django.db.models import F
from django.utils import timezone

from apps.common.exceptions import AlreadyReviewed, ReviewNotAllowed, NotFound, ShopError
from apps.common.models import Notification
from apps.common.services import NotificationService
from apps.orders.models import Order
from apps.points.models import PointsTransaction
from apps.points.services import PointsService
from apps.products.models import Product
from apps.promotions.models import Promotion
from apps.promotions.services import PromotionService
from ..models import Review

logger = logging.getLogger(__name__)

REWARD_COUPON = 'coupon'
REWARD_POINTS = 'points'


class ReviewService:
    """Service for reviews and comments"""

    @staticmethod
    def _get_product(product_id) -> Product:
        product = Product.objects.filter(pk=product_id).first()
        if product is None:
            raise NotFound(f'Product {product_id} not found')
        return product

    @staticmethod
    def has_received(user, product_id) -> bool:
        return Order.objects.filter(
            user=user,
            status=Order.STATUS_DELIVERED,
            items__product_id=product_id,
        ).exists()

    @staticmethod
    def grant_reward(user, review) -> dict:
        """Coin flip between a personal single-use coupon and a points credit"""
        if random.random() < 0.5:
            percent = settings.REVIEW_COUPON_PERCENT
            promotion = PromotionService.create(
                code=f'REVIEW{int(time.time() * 1000)}',
                discount=Decimal(percent),
                discount_type=Promotion.TYPE_PERCENT,
                expires_at=timezone.now() + timedelta(days=settings.REVIEW_COUPON_DAYS),
                user=user,
                description=f'Thank you for reviewing {review.product.name}',
            )
            NotificationService.publish_on_commit(
                user.id,
                f'You earned a {percent}% coupon: {promotion.code}',
                Notification.CATEGORY_PROMOTION,
            )
            return {'type': REWARD_COUPON, 'code': promotion.code, 'expires_at': promotion.expires_at}

        amount = settings.REVIEW_REWARD_POINTS
        PointsService.credit(
            user.id,
            amount,
            description=f'Review reward for {review.product.name}',
            reference_id=f'review-{review.id}',
            transaction_type=PointsTransaction.TYPE_EARNING,
        )
        NotificationService.publish_on_commit(
            user.id,
            f'You earned {amount} points for your review',
            Notification.CATEGORY_REVIEW,
        )
        return {'type': REWARD_POINTS, 'amount': amount}

    @staticmethod
    def submit_review(user, product_id, rating, comment=''):
        """Returns (review, reward)"""
        product = ReviewService._get_product(product_id)
        if not ReviewService.has_received(user, product_id):
            raise ReviewNotAllowed()
        if Review.objects.filter(user=user, product=product, rating__isnull=False).exists():
            raise AlreadyReviewed()

        with transaction.atomic():
            try:
                with transaction.atomic():
                    review = Review.objects.create(
                        user=user, product=product, rating=rating, comment=comment or ''
                    )
            except IntegrityError:
                raise AlreadyReviewed()
            Product.objects.filter(pk=product.pk).update(comment_count=F('comment_count') + 1)
            reward = ReviewService.grant_reward(user, review)

        logger.info(f"User {user.id} reviewed product {product.id} ({rating}/5), reward {reward['type']}")
        return review, reward

    @staticmethod
    @transaction.atomic
    def submit_comment(user, product_id, comment) -> Review:
        comment = (comment or '').strip()
        if not comment:
            raise ShopError('Comment is required')
        product = ReviewService._get_product(product_id)
        review = Review.objects.create(user=user, product=product, comment=comment)
        Product.objects.filter(pk=product.pk).update(comment_count=F('comment_count') + 1)
        return review

    @staticmethod
    def list_reviews(product_id):
        return Review.objects.filter(product_id=product_id, rating__isnull=False).select_related('user')

    @staticmethod
    def list_comments(product_id):
        return (
            Review.objects.filter(product_id=product_id, rating__isnull=True)
            .exclude(comment='')
            .select_related('user')
        )

    @staticmethod
    def list_user_reviews(user):
        return Review.objects.filter(user=user).select_related('product')
