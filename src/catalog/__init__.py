"""Catalog Service - Root Package.

This package manages two near-identical catalogs, Items and Products. Each
entry is a name measured by a fixed measure type (weight or liquid) and can
be archived and unarchived instead of being deleted.

The service implements a Domain-Driven Design (DDD) architecture with CQRS
patterns, keeping the archivable lifecycle and the duplicate rule in the
domain layer.

Key Components:
    - domain: Aggregates, value objects, duplicate rules and repository ports
    - application: Commands, queries and their handlers
    - infrastructure: Persistence adapters, buses, event publishing, logging
    - config: Configuration schemas and loading
    - cli: Command line entry point

Architecture:
    The system follows Clean Architecture principles with clear separation
    between domain logic, application services, and infrastructure concerns.
"""

__version__ = "1.0.0"
PACKAGE_NAME = "catalog-service"

__package_name__ = PACKAGE_NAME
