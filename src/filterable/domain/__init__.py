"""Domain layer: contracts, configuration and exceptions.

No dependencies on application or infrastructure.
"""
