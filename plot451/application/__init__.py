"""
Application layer.

Use cases orchestrate domain objects: they build value objects from
primitive input, load entities through repository protocols, apply entity
and collection operations and persist the result.
"""
