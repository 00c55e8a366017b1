"""
Business logic services.

Services connect the core resolution logic to configuration and the API.
"""
from chronoscape.services import background_service
