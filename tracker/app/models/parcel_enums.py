"""
Parcel Status Enumeration.
"""

import enum


class ParcelStatus(str, enum.Enum):
    """
    Well-known parcel status labels.
    
    Status flow:
        REGISTERED → SENT → DELIVERED
    The store does not enforce this flow; any label may overwrite any other.
    """
    REGISTERED = "registered"
    SENT = "sent"
    DELIVERED = "delivered"
