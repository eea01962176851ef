"""
Generador de datos falsos para el modo "faker".

Responsabilidad: Proveer valores aleatorios para los métodos `fake()` de los
modelos. Solo se usa en demos y tests, nunca en un camino con red.
"""

from __future__ import annotations

import random
from collections.abc import Callable, Sequence
from datetime import datetime
from typing import TypeVar

from faker import Faker

T = TypeVar("T")

fake = Faker()


class FakeHelper:
    """Thin facade over Faker with the value shapes WooCommerce uses."""

    @staticmethod
    def seed(value: int) -> None:
        """Seed both Faker and `random` so fake runs can be reproduced."""
        Faker.seed(value)
        random.seed(value)

    @staticmethod
    def integer(max_value: int = 100, min_value: int = 1) -> int:
        return fake.random_int(min=min_value, max=max_value)

    @staticmethod
    def word() -> str:
        return fake.word()

    @staticmethod
    def sentence() -> str:
        return fake.sentence()

    @staticmethod
    def paragraph() -> str:
        return fake.paragraph()

    @staticmethod
    def slug() -> str:
        return fake.slug()

    @staticmethod
    def url() -> str:
        return fake.url(schemes=["https"])

    @staticmethod
    def image() -> str:
        return fake.image_url()

    @staticmethod
    def datetime() -> datetime:
        return fake.date_time_between(start_date="-2y", end_date="+1y").replace(microsecond=0)

    @staticmethod
    def boolean() -> bool:
        return fake.boolean()

    @staticmethod
    def decimal(max_value: int = 1) -> float:
        return round(random.uniform(0, max_value), 2)

    @staticmethod
    def price() -> float:
        return round(random.uniform(1, 500), 2)

    @staticmethod
    def list(factory: Callable[[], T], max_items: int = 10) -> list[T]:
        return [factory() for _ in range(fake.random_int(min=0, max=max_items))]

    @staticmethod
    def integers(count: int = 5, max_value: int = 100) -> list[int]:
        return [fake.random_int(min=1, max=max_value) for _ in range(count)]

    @staticmethod
    def random_item(items: Sequence[T]) -> T:
        return random.choice(list(items))

    @staticmethod
    def first_name() -> str:
        return fake.first_name()

    @staticmethod
    def last_name() -> str:
        return fake.last_name()

    @staticmethod
    def username() -> str:
        return fake.user_name()

    @staticmethod
    def email() -> str:
        return fake.free_email()

    @staticmethod
    def address() -> str:
        return fake.street_address()

    @staticmethod
    def city() -> str:
        return fake.city()

    @staticmethod
    def country() -> str:
        return fake.country()

    @staticmethod
    def country_code() -> str:
        return fake.country_code()

    @staticmethod
    def state() -> str:
        return fake.state_abbr()

    @staticmethod
    def postcode() -> str:
        return fake.postcode()

    @staticmethod
    def company() -> str:
        return fake.company()

    @staticmethod
    def phone_number() -> str:
        return fake.phone_number()

    @staticmethod
    def ip_address() -> str:
        return fake.ipv4()

    @staticmethod
    def sku() -> str:
        return f"woo-{fake.ean8()}"

    @staticmethod
    def uuid() -> str:
        return fake.uuid4()

    @staticmethod
    def currency_code() -> str:
        return fake.currency_code()

    @staticmethod
    def currency_name() -> str:
        return fake.currency_name()

    @staticmethod
    def version() -> str:
        return f"{fake.random_int(min=1, max=9)}.{fake.random_int(min=0, max=9)}.{fake.random_int(min=0, max=9)}"
