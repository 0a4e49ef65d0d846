"""
Version 1 of the API.

Every handler is exposed as a named operation: the ``operation_id`` of
each route (``getProjects``, ``createSkill``, ...) is its public name.
"""
