"""
Domain layer - Contains purchase entities, value objects, ports and errors.
This layer is independent of external concerns and contains the pricing rules.
"""
