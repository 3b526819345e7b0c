"""
Infrastructure layer package.

Contains concrete implementations (adapters) of the ports
defined in the domain layer. This is where quote APIs,
caches, and synthetic data sources live.
"""
