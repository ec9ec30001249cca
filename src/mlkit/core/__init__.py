"""
Core layer: errors, numeric helpers, data handling and utilities.
"""
