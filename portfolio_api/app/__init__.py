"""
Application package initializer.

The project is organised by entity: each one (user, skills, projects,
certificates, experience, testimonials, contact messages, newsletter)
has a schema module, a service and a router under
``api/v1/endpoints``.  Shared plumbing lives in ``core``.
"""

from .main import app  # noqa: F401
