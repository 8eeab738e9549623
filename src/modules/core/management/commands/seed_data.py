from __future__ import annotations

import random
from decimal import Decimal

from django.core.management.base import BaseCommand
from django.db import transaction

from modules.beers.models import Beer
from modules.beers.repositories import BeerDjangoRepository
from modules.customers.models import Customer
from modules.customers.repositories import CustomerDjangoRepository
from modules.orders.dtos import CreateBeerOrderDTO, CreateBeerOrderLineDTO
from modules.orders.models import BeerOrder
from modules.orders.repositories import OrderDjangoRepository
from modules.orders.services import OrderService


class Command(BaseCommand):
    help = "Seed database with sample beers, customers and orders."

    def add_arguments(self, parser):
        parser.add_argument(
            "--orders",
            type=int,
            default=20,
            help="Number of orders to create (default: 20).",
        )

    @transaction.atomic
    def handle(self, *args, **options):
        random.seed(42)
        self.stdout.write("Seeding development data...")

        beers = self._seed_beers()
        customers = self._seed_customers()
        orders_created = self._seed_orders(customers, beers, options["orders"])

        self.stdout.write(
            self.style.SUCCESS(
                "Seed completed: "
                f"beers={len(beers)}, "
                f"customers={len(customers)}, "
                f"orders={orders_created}"
            )
        )

    def _seed_beers(self) -> list[Beer]:
        self.stdout.write("Creating beers...")
        beers: list[Beer] = []
        catalog = [
            ("Mango Bobs", "ALE", "0631234200036", Decimal("12.95")),
            ("Galaxy Cat", "PALE_ALE", "0631234300019", Decimal("12.95")),
            ("No Hammers On The Bar", "WHEAT", "0083783375213", Decimal("11.50")),
            ("Blessed", "STOUT", "4666337557578", Decimal("13.25")),
            ("Adjunct Trail", "STOUT", "8380495518610", Decimal("14.10")),
            ("Very GGGreenn", "IPA", "5677465691934", Decimal("12.95")),
            ("Double Barrel Hunahpu's", "STOUT", "5463533082885", Decimal("19.90")),
            ("Pinball Porter", "PORTER", "0083783375220", Decimal("10.75")),
            ("Golden Budda", "LAGER", "0631234300026", Decimal("9.95")),
            ("Cactus Juice", "SAISON", "0083783375214", Decimal("11.25")),
        ]
        for name, style, upc, price in catalog:
            beer, _ = Beer.objects.get_or_create(
                beer_name=name,
                defaults={
                    "beer_style": style,
                    "upc": upc,
                    "price": price,
                    "quantity_on_hand": random.randint(10, 200),
                },
            )
            beers.append(beer)
        self.stdout.write(self.style.SUCCESS("Creating beers... Done!"))
        return beers

    def _seed_customers(self) -> list[Customer]:
        self.stdout.write("Creating customers...")
        customers: list[Customer] = []
        seed_customers = [
            ("Tasting Room", "tasting.room@example.com", "555-0100"),
            ("Corner Pub", "corner.pub@example.com", "555-0101"),
            ("Hop Shop", "hop.shop@example.com", ""),
            ("Brew Club", None, "555-0103"),
        ]
        for name, email, phone in seed_customers:
            customer, _ = Customer.objects.get_or_create(
                customer_name=name,
                defaults={"email": email, "phone": phone},
            )
            customers.append(customer)
        self.stdout.write(self.style.SUCCESS("Creating customers... Done!"))
        return customers

    def _seed_orders(
        self, customers: list[Customer], beers: list[Beer], count: int
    ) -> int:
        self.stdout.write("Creating orders...")
        if not customers or not beers:
            self.stdout.write(self.style.WARNING("Skipping orders (no customers/beers)."))
            return 0
        if BeerOrder.objects.exists():
            self.stdout.write(self.style.WARNING("Orders already present, skipping."))
            return 0

        service = OrderService(
            order_repository=OrderDjangoRepository(),
            customer_repository=CustomerDjangoRepository(),
            beer_repository=BeerDjangoRepository(),
        )
        for _ in range(count):
            customer = random.choice(customers)
            lines = [
                CreateBeerOrderLineDTO(
                    beer_id=beer.id, order_quantity=random.randint(1, 12)
                )
                for beer in random.sample(beers, k=random.randint(1, 3))
            ]
            order = service.create_order(
                CreateBeerOrderDTO(customer_id=customer.id, beer_order_lines=lines)
            )
            if random.random() < 0.2:
                service.cancel_order(order.id)

        self.stdout.write(self.style.SUCCESS("Creating orders... Done!"))
        return count
