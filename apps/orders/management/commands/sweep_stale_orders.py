"""
Management command that confirms NEW orders past the auto-confirm delay
"""
import time

from django.conf import settings
from django.core.management.base import BaseCommand

from apps.orders.services import OrderService


class Command(BaseCommand):
    help = 'Confirm NEW orders older than ORDER_AUTO_CONFIRM_MINUTES'

    def add_arguments(self, parser):
        parser.add_argument(
            '--interval',
            type=int,
            nargs='?',
            const=settings.ORDER_SWEEP_INTERVAL_SECONDS,
            default=None,
            help='Keep running, sweeping every INTERVAL seconds '
                 f'(default when given without a value: {settings.ORDER_SWEEP_INTERVAL_SECONDS})'
        )

    def handle(self, *args, **options):
        interval = options['interval']

        if not interval:
            confirmed = OrderService.sweep_stale_orders()
            self.stdout.write(self.style.SUCCESS(f'Confirmed {confirmed} stale orders'))
            return

        self.stdout.write(f'Sweeping stale orders every {interval}s (Ctrl+C to stop)')
        try:
            while True:
                confirmed = OrderService.sweep_stale_orders()
                if confirmed:
                    self.stdout.write(self.style.SUCCESS(f'Confirmed {confirmed} stale orders'))
                time.sleep(interval)
        except KeyboardInterrupt:
            self.stdout.write('Sweep stopped')
