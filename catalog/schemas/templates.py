"""Template Pydantic schemas (request DTOs and response models).

Create and update share one shape: PUT replaces every field.
"""


from catalog.schemas.common import DisplayOrderedIn, EntityOut

class TemplateIn(DisplayOrderedIn):
    name: str
    view_path: str

class TemplateOut(EntityOut):
    name: str
    view_path: str
    display_order: int

class ProductTemplateIn(TemplateIn):
    ignored_product_types: str | None = None

class ProductTemplateOut(TemplateOut):
    ignored_product_types: str | None = None
