"""
Reference in-memory storage adapter.
"""
