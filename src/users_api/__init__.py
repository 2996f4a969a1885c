"""
Users API - list and create users backed by MongoDB
"""

__version__ = "1.0.0"
