"""
Direcciones de facturación y envío
Responsabilidad: Value objects compartidos por pedidos y clientes
"""

from typing import Optional, Self

from woocommerce_api.utils.fake_helper import FakeHelper

from .base import WooBaseModel


class WooShipping(WooBaseModel):
    """Dirección de envío"""

    first_name: Optional[str] = None
    last_name: Optional[str] = None
    company: Optional[str] = None
    address_1: Optional[str] = None
    address_2: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    postcode: Optional[str] = None
    country: Optional[str] = None
    phone: Optional[str] = None

    @classmethod
    def fake(cls) -> Self:
        return cls(
            first_name=FakeHelper.first_name(),
            last_name=FakeHelper.last_name(),
            company=FakeHelper.company(),
            address_1=FakeHelper.address(),
            address_2=FakeHelper.address(),
            city=FakeHelper.city(),
            state=FakeHelper.state(),
            postcode=FakeHelper.postcode(),
            country=FakeHelper.country_code(),
            phone=FakeHelper.phone_number(),
        )

    @property
    def full_name(self) -> str:
        return " ".join(part for part in (self.first_name, self.last_name) if part)


class WooBilling(WooShipping):
    """Dirección de facturación (agrega email)"""

    email: Optional[str] = None

    @classmethod
    def fake(cls) -> Self:
        return cls.from_dict({**WooShipping.fake().to_snapshot(), "email": FakeHelper.email()})
