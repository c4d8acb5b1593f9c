"""
Domain layer: entities, value objects and the capability ports the use cases
depend on. Nothing here knows about storage, transport or cryptography.
"""
