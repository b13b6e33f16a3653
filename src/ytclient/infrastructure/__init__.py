"""
Infrastructure Package
"""
