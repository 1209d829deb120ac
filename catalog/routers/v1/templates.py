"""Category, manufacturer and product template routers."""


from catalog.routers.v1.crud import build_crud_router
from catalog.schemas.templates import (
    ProductTemplateIn,
    ProductTemplateOut,
    TemplateIn,
    TemplateOut,
)
from catalog.services.templates import (
    CategoryTemplateService,
    ManufacturerTemplateService,
    ProductTemplateService,
)

category_templates_router = build_crud_router(
    prefix="/category-templates",
    tag="Category templates",
    service_class=CategoryTemplateService,
    schema_in=TemplateIn,
    schema_out=TemplateOut,
)

manufacturer_templates_router = build_crud_router(
    prefix="/manufacturer-templates",
    tag="Manufacturer templates",
    service_class=ManufacturerTemplateService,
    schema_in=TemplateIn,
    schema_out=TemplateOut,
)

product_templates_router = build_crud_router(
    prefix="/product-templates",
    tag="Product templates",
    service_class=ProductTemplateService,
    schema_in=ProductTemplateIn,
    schema_out=ProductTemplateOut,
)
