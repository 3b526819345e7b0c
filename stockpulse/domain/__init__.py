"""
Domain layer package.

Contains pure business logic: entities, value objects, domain services,
and port interfaces. Only numpy is allowed here, for indicator math.
No framework imports, no IO, no side effects.
"""
