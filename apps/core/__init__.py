"""Core app package.

Platform endpoints that do not belong to a business domain, such as the
health check used by container orchestration.
"""
