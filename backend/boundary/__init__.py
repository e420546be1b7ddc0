"""
Boundary layer for external system integrations.

Handles all interactions with external systems (database, object storage,
the screenshot microservice, the REST API). Provides adapters and clients
for infrastructure dependencies.
"""
