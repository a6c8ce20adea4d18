"""
Application layer - use case interactors and the output port seam.
"""
