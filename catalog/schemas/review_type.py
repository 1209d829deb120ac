"""Review type and mapping Pydantic schemas."""


from catalog.schemas.common import CamelModel, DisplayOrderedIn, EntityOut

class ReviewTypeIn(DisplayOrderedIn):
    name: str
    description: str = ""
    visible_to_all_customers: bool = False
    is_required: bool = False

class ReviewTypeOut(EntityOut):
    name: str
    description: str
    display_order: int
    visible_to_all_customers: bool
    is_required: bool

class ReviewTypeMappingIn(CamelModel):
    product_review_id: int
    review_type_id: int
    rating: int = 0

class ReviewTypeMappingOut(EntityOut):
    product_review_id: int
    review_type_id: int
    rating: int
