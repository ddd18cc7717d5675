"""
Boundary layer for external system integrations.

Holds the database adapter for care plans, patient records, attribution
documents, and audit events.
"""
