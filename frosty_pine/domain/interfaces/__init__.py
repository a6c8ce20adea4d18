"""
Ports the domain depends on.
"""
