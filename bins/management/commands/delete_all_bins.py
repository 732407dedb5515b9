from django.core.management.base import BaseCommand

from bins.models import Bin, PickupLog


class Command(BaseCommand):
    help = "Delete all bins and their pickup logs from the database"

    def add_arguments(self, parser):
        parser.add_argument(
            "--confirm",
            action="store_true",
            help="Confirm deletion without prompting",
        )

    def handle(self, *args, **options):
        bin_count = Bin.objects.count()

        if bin_count == 0:
            self.stdout.write(self.style.SUCCESS("No bins found in the database."))
            return

        pickup_count = PickupLog.objects.count()
        self.stdout.write(f"Found {bin_count} bins with {pickup_count} pickup logs in the database.")

        if not options["confirm"]:
            confirm = input("Are you sure you want to delete ALL bins and pickup logs? This action cannot be undone. (yes/no): ")
            if confirm.lower() != "yes":
                self.stdout.write(self.style.WARNING("Operation cancelled."))
                return

        # Pickup logs go with their bins (ON DELETE CASCADE)
        _, deleted_by_model = Bin.objects.all().delete()

        self.stdout.write(
            self.style.SUCCESS(
                f"Successfully deleted {deleted_by_model.get('bins.Bin', 0)} bins "
                f"and {deleted_by_model.get('bins.PickupLog', 0)} pickup logs from the database."
            )
        )
