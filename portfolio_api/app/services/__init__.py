"""
Service layer abstraction.

Each service encapsulates the business rules for one entity and its
SQL.  API handlers only validate input, call a service and return the
result, so the storage can change without touching the routes.
"""
