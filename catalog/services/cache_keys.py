"""Cache keys for catalog lookups.

Every key carries its entity-kind prefix; writes invalidate the whole prefix.
"""

from catalog.core.caching import CacheKey

CATEGORY_TEMPLATE_PREFIX = "catalog.categorytemplate."
MANUFACTURER_TEMPLATE_PREFIX = "catalog.manufacturertemplate."
PRODUCT_TEMPLATE_PREFIX = "catalog.producttemplate."
REVIEW_TYPE_PREFIX = "catalog.reviewtype."
PRODUCT_REVIEW_REVIEW_TYPE_MAPPING_PREFIX = "catalog.productreviewreviewtypemapping."

CATEGORY_TEMPLATES_ALL = CacheKey(f"{CATEGORY_TEMPLATE_PREFIX}all", CATEGORY_TEMPLATE_PREFIX)
MANUFACTURER_TEMPLATES_ALL = CacheKey(
    f"{MANUFACTURER_TEMPLATE_PREFIX}all", MANUFACTURER_TEMPLATE_PREFIX
)
PRODUCT_TEMPLATES_ALL = CacheKey(f"{PRODUCT_TEMPLATE_PREFIX}all", PRODUCT_TEMPLATE_PREFIX)
REVIEW_TYPES_ALL = CacheKey(f"{REVIEW_TYPE_PREFIX}all", REVIEW_TYPE_PREFIX)

# {0}: product review id
PRODUCT_REVIEW_REVIEW_TYPE_MAPPINGS_ALL = CacheKey(
    f"{PRODUCT_REVIEW_REVIEW_TYPE_MAPPING_PREFIX}all-{{0}}",
    PRODUCT_REVIEW_REVIEW_TYPE_MAPPING_PREFIX,
)
