"""
Helper Functions

Contains utility functions used throughout the application.
"""

from typing import Dict


def get_user_identity(request_obj) -> Dict[str, str]:
    """Extract client identity information from a request."""
    user_agent = getattr(request_obj, 'user_agent', None)
    return {
        'user_ip': getattr(request_obj, 'remote_addr', None) or 'unknown',
        'user_agent': str(user_agent) if user_agent else None
    }
