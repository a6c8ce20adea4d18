"""
Infrastructure layer - logging, configuration, error handling and storage adapters.
"""
