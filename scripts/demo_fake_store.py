#!/usr/bin/env python3
"""Recorrer una tienda WooCommerce ficticia usando el modo faker (sin red)."""

import argparse
import asyncio
import logging

from woocommerce_api import FakeHelper, WooCommerceFactory
from woocommerce_api.models import WooOrderStatus, WooProductFilterWithType, WooProductTag


async def main(seed: int | None, per_page: int):
    if seed is not None:
        FakeHelper.seed(seed)

    async with WooCommerceFactory.create_fake() as woo:
        # 1. Catálogo
        print("1. Categorías")
        for category in await woo.get_categories(per_page=per_page):
            print(f"   [{category.id}] {category.name} ({category.count} productos)")

        print("\n2. Productos")
        products = await woo.get_products(per_page=per_page)
        for product in products:
            stock = "en stock" if product.is_in_stock() else "sin stock"
            print(f"   [{product.id}] {product.name} ${product.price} {product.type} - {stock}")

        # 2. Producto con relacionados
        main_product = products[0]
        detail = await woo.get_product_with_options(
            main_product, [WooProductFilterWithType.RELATED_IDS, WooProductFilterWithType.UPSELL_IDS]
        )
        print(f"\n3. '{detail.main_product.name}': {len(detail.related_products or [])} relacionados")

        # 3. Pedidos
        print("\n4. Pedidos")
        for order in await woo.get_orders(per_page=per_page, status=[WooOrderStatus.PROCESSING]):
            billing = order.billing.full_name if order.billing else "-"
            print(f"   #{order.number} {order.status} {order.total} {order.currency} ({billing})")

        # 4. Escritura (eco del input sobre datos falsos)
        tag = await woo.create_product_tag(WooProductTag(name="Sale"))
        print(f"\n5. Tag creado: [{tag.id}] {tag.name}")
        deleted = await woo.delete_product_tag(tag.id)
        print(f"   Tag borrado: [{deleted.id}]")

        # 5. Tienda
        print("\n6. Zonas de envío")
        for zone in await woo.get_shipping_zones():
            methods = await woo.get_shipping_zone_methods(zone.id)
            print(f"   [{zone.id}] {zone.name}: {', '.join(method.title for method in methods)}")

        report = (await woo.get_sales_report())[0]
        print(f"\n7. Ventas: {report.total_sales} en {report.total_orders} pedidos")


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--seed", type=int, default=None, help="Semilla para datos reproducibles")
    parser.add_argument("--per-page", type=int, default=5)
    parser.add_argument("--debug", action="store_true", help="Loguear las llamadas en modo faker")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    asyncio.run(main(args.seed, args.per_page))
