"""
Helper Functions

Contains utility functions used throughout the application.
"""

from typing import Dict, Optional


def get_user_identity(request_obj) -> Dict[str, Optional[str]]:
    """Extract user identity information from a Flask request."""
    user_ip = getattr(request_obj, 'remote_addr', None) or 'unknown'

    return {
        'user_ip': user_ip,
        'session_id': getattr(request_obj, 'sid', None)  # Socket.IO requests only
    }
