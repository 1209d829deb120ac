"""Services package — all business logic lives here, never in routers.

Files:
  base.py         — CachedEntityService[ModelT]: cached list, notified writes
  cache_keys.py   — Cache keys and invalidation prefixes per entity kind
  templates.py    — Category / manufacturer / product template services
  review_type.py  — Review type service + product review mappings

Rule: routers call services, services call repositories, repositories call the DB.
      No SQLAlchemy queries in routers. No FastAPI imports in services.
"""
