"""Category, manufacturer and product template services."""


from catalog.domain.templates import CategoryTemplate, ManufacturerTemplate, ProductTemplate
from catalog.repositories.templates import (
    CategoryTemplateRepository,
    ManufacturerTemplateRepository,
    ProductTemplateRepository,
)
from catalog.services.base import CachedEntityService
from catalog.services.cache_keys import (
    CATEGORY_TEMPLATES_ALL,
    MANUFACTURER_TEMPLATES_ALL,
    PRODUCT_TEMPLATES_ALL,
)


class CategoryTemplateService(CachedEntityService[CategoryTemplate]):
    repository_class = CategoryTemplateRepository
    all_cache_key = CATEGORY_TEMPLATES_ALL


class ManufacturerTemplateService(CachedEntityService[ManufacturerTemplate]):
    repository_class = ManufacturerTemplateRepository
    all_cache_key = MANUFACTURER_TEMPLATES_ALL


class ProductTemplateService(CachedEntityService[ProductTemplate]):
    repository_class = ProductTemplateRepository
    all_cache_key = PRODUCT_TEMPLATES_ALL
