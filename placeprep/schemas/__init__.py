"""
Schemas module - Request/Response schemas for API endpoints.

Internal records (TestRecord, LeaderboardEntry, ...) live beside the
services that compute them; these are the API contract only.
"""
