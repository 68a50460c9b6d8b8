"""
Utilities - configuration and factories.
"""
