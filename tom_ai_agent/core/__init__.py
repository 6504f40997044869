"""
Core domain types for the TOM theatre assistant.
"""
