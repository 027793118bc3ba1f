# ==============================================================================
# UOW ORDERS - Order Service with Ambient Unit of Work
# ==============================================================================

"""
Order service whose repositories share one transaction per request
without passing a session around.
"""

__version__ = "1.0.0"
