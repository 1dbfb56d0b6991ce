"""
Domain Layer

This package contains the point-of-sale business rules, separated from
persistence concerns and infrastructure. Nothing in here touches the
database, the HTTP layer or the logger; rule violations are raised as
exceptions from the exceptions module.

Structure:
- entities/: Business entities with identity (products, tables, orders)
- value_objects/: Immutable value types without identity
- aggregates/: Aggregate roots that own related entities (menus, table groups)
- interfaces.py: Lookup contracts the persistence layer implements
- specifications.py: Composable business-rule predicates
"""
