"""Template repositories — one per template kind, no custom queries."""


from catalog.domain.templates import CategoryTemplate, ManufacturerTemplate, ProductTemplate
from catalog.repositories.base import BaseRepository


class CategoryTemplateRepository(BaseRepository[CategoryTemplate]):
    model = CategoryTemplate


class ManufacturerTemplateRepository(BaseRepository[ManufacturerTemplate]):
    model = ManufacturerTemplate


class ProductTemplateRepository(BaseRepository[ProductTemplate]):
    model = ProductTemplate
