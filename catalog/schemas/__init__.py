"""Pydantic schemas package.

Folder intent:
  common.py       — CamelModel base, EntityOut, HealthResponse (all schemas inherit CamelModel)
  templates.py    — Category / manufacturer / product template DTOs
  review_type.py  — Review type and product review mapping DTOs
"""
