from django.core.management.base import BaseCommand

from apps.catalog.container import build_catalog_service


class Command(BaseCommand):
    help = "Load the storefront catalog and seed the database adapter if it is empty."

    def handle(self, *args, **options):
        service = build_catalog_service()
        self.stdout.write("Initializing catalog...")
        seeded = service.initialize()
        products = service.list_products()
        if seeded:
            self.stdout.write(f"Seeded database with {len(products)} products.")
        else:
            self.stdout.write("Database not seeded (already populated or unavailable).")
        self.stdout.write(self.style.SUCCESS(f"Catalog ready: {len(products)} products."))
