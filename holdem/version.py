"""
Version information for the Hold'em engine.
"""

VERSION = "0.1.0"


def get_version_info():
    """Get formatted version information"""
    return {
        'version': VERSION,
    }
