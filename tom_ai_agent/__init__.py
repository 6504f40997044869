"""
TOM (Theatre Operations Manager): RAG assistant for hospital theatre scheduling.
"""

__version__ = "1.0.0"
