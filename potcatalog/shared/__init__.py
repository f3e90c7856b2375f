"""
Pot Catalog Shared Kernel
=========================

UI-independent logic and infrastructure.

Architecture:
- core: EventBus, event definitions, configuration
- domain: Business logic (pot records, parsing, catalog store)
"""

__version__ = "1.0.0"

__all__ = []
