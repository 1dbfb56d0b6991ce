"""
Data Transfer Objects (DTOs) Layer

This package contains DTOs that decouple the API layer from the domain and
database models.

Structure:
- request/: DTOs for incoming API requests
- response/: DTOs for outgoing API responses
"""
