"""Remove duplicate (event, email) bookings left over from before the unique constraint.

Dry run by default; pass --apply to delete. The earliest booking in each
group is kept.
"""

import logging
from dataclasses import dataclass
from uuid import UUID

from django.core.management.base import BaseCommand
from django.db import transaction
from django.db.models import Count

from events.models import Booking

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DuplicateGroup:
    event_id: UUID
    email: str
    ids: tuple[UUID, ...]  # oldest first

    @property
    def keep(self) -> UUID:
        return self.ids[0]

    @property
    def extra(self) -> tuple[UUID, ...]:
        return self.ids[1:]


def find_duplicate_groups() -> list[DuplicateGroup]:
    keys = (
        Booking.objects.values("event_id", "email")
        .annotate(count=Count("id"))
        .filter(count__gt=1)
        .order_by("event_id", "email")
    )
    groups = []
    for key in keys:
        ids = (
            Booking.objects.filter(event_id=key["event_id"], email=key["email"])
            .order_by("created_at", "id")
            .values_list("id", flat=True)
        )
        groups.append(DuplicateGroup(event_id=key["event_id"], email=key["email"], ids=tuple(ids)))
    return groups


class Command(BaseCommand):
    help = "Find and optionally delete duplicate bookings per (event, email)."

    def add_arguments(self, parser):
        parser.add_argument(
            "--apply",
            action="store_true",
            help="Delete duplicates instead of only reporting them.",
        )

    def handle(self, *args, **options):
        apply = options["apply"]
        groups = find_duplicate_groups()

        if not groups:
            self.stdout.write("No duplicate bookings found.")
            return

        self.stdout.write(f"Found {len(groups)} duplicate booking group(s).")
        total_deleted = 0

        for group in groups:
            self.stdout.write(
                f"eventId={group.event_id} email={group.email} keep={group.keep} delete={len(group.extra)}"
            )
            if apply and group.extra:
                with transaction.atomic():
                    deleted, _ = Booking.objects.filter(id__in=group.extra).delete()
                total_deleted += deleted

        if apply:
            logger.info("Deleted %d duplicate booking(s)", total_deleted)
            self.stdout.write(f"Deleted {total_deleted} duplicate booking(s).")
        else:
            self.stdout.write("Dry run only. Re-run with --apply to delete duplicates.")
