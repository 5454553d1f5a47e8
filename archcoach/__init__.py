"""
Architecture Interview Coach backend.
"""
