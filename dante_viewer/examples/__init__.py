"""
Demonstration scripts.
"""
