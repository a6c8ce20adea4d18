"""
Presentation layer - presenters, display models and the command line shell.
"""
