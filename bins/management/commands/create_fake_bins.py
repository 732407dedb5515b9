from django.core.management.base import BaseCommand, CommandError
from django.db import transaction
from faker import Faker

from bins import registry
from bins.exceptions import WasteError

BIN_TYPES = ("general", "recyclable", "organic")


class Command(BaseCommand):
    help = "Create fake bins with random locations and fill levels for testing"

    def add_arguments(self, parser):
        parser.add_argument("count", type=int, help="Number of bins to create")
        parser.add_argument("--seed", type=int, default=None, help="Seed for reproducible data")
        parser.add_argument(
            "--empty",
            action="store_true",
            help="Leave the new bins at 0%% instead of a random fill level",
        )

    def handle(self, *args, **options):
        count = options["count"]
        if count < 1:
            msg = "count must be at least 1"
            raise CommandError(msg)

        fake = Faker()
        if options["seed"] is not None:
            Faker.seed(options["seed"])

        for _ in range(count):
            location = fake.street_name()
            bin_type = fake.random_element(BIN_TYPES)
            try:
                with transaction.atomic():
                    new_bin = registry.create_bin(location, bin_type)
                    if not options["empty"]:
                        registry.set_fill_level(new_bin.id, fake.random_int(min=0, max=100))
            except WasteError as e:
                raise CommandError(f"Failed to create bin at {location!r}: {e}") from e

            new_bin.refresh_from_db()
            self.stdout.write(
                self.style.SUCCESS(
                    f"Created bin {new_bin.id}: {new_bin.location} ({new_bin.type}) "
                    f"{new_bin.fill_level}% {new_bin.status}"
                )
            )
