from typing import Any, Dict

from pagebuilder.catalog.service import ProductCatalog
from pagebuilder.domain.page import Page
from pagebuilder.domain.targeting import section_product_ids
from pagebuilder.normalizers.page import normalize_page


def render_page(*, page: Page, catalog: ProductCatalog) -> Dict[str, Any]:
    """
    Public view of a page: product sections get their products and, per
    product, the badges that target it.

    Each section looks up its own id set so it shares cache entries with
    any other section or page asking for the same products.
    """
    products = {}
    for section in page.content:
        ids = section_product_ids(section)
        if ids:
            for product in catalog.get_products_by_ids(ids):
                products[product.id] = product

    return normalize_page(page, admin=False, products=products)
