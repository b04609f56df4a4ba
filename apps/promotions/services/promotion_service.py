"""
Promotion store.
"""
import logging

from django.db.models import Q
from django.utils import timezone

from apps.common.exceptions import NotFound
from ..models import Promotion

logger = logging.getLogger(__name__)


class PromotionService:
    """Lookup, creation and consumption of promotion codes"""

    @staticmethod
    def find_applicable(code, user_id, now=None):
        """Unexpired promotion with this code that is global or owned by ``user_id``"""
        now = now or timezone.now()
        code = (code or '').strip()
        if not code:
            return None
        return Promotion.objects.filter(
            Q(user__isnull=True) | Q(user_id=user_id),
            code=code,
            expires_at__gt=now,
        ).first()

    @staticmethod
    def delete_by_id(promotion_id) -> bool:
        """Delete the promotion; False when someone else already did"""
        deleted, _ = Promotion.objects.filter(pk=promotion_id).delete()
        return deleted > 0

    @staticmethod
    def list_active(user=None, now=None):
        now = now or timezone.now()
        owner = Q(user__isnull=True)
        if user is not None and user.is_authenticated:
            owner |= Q(user=user)
        return Promotion.objects.filter(owner, expires_at__gt=now)

    @staticmethod
    def create(**fields) -> Promotion:
        promotion = Promotion.objects.create(**fields)
        logger.info(f"Promotion {promotion.code} created (single use: {promotion.is_single_use})")
        return promotion

    @staticmethod
    def delete(promotion_id) -> None:
        if not PromotionService.delete_by_id(promotion_id):
            raise NotFound(f'Promotion {promotion_id} not found')
