"""v1 router package — all /api/v1/* endpoints live here.

Files:
  crud.py          — build_crud_router(): the five endpoints every lookup kind shares
  templates.py     — /category-templates, /manufacturer-templates, /product-templates
  review_types.py  — /review-types and /review-types/mappings

Rule: Routers only handle HTTP (request parsing, response shaping).
      All business logic delegates to catalog/services/.
"""
