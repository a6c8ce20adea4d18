"""
Domain value objects.
"""
