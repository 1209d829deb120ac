"""Repositories package — the only layer that issues SQL.

Files:
  base.py         — Generic BaseRepository[ModelT]
  templates.py    — Category / manufacturer / product template repositories
  review_type.py  — Review type + product review mapping repositories
"""
