"""
Conference Management Module

Profiles and conferences with clear separation of concerns:
- auth: Caller identity
- domain: Domain models and keys
- services: Business logic
- repositories: Data access
- api: REST API endpoints
"""
