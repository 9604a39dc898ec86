"""
Domain layer.

The domain layer contains the core business logic of the application.
It has no dependencies on infrastructure and does not log.

This layer contains:
- Value Objects: Immutable single values guarded by a validation hook
- Entities: Multi-field records validated by rule sets
- Rule Sets: Declarative cross-field business rules
"""
