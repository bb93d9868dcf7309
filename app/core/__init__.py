"""
Core package: settings and the composition root.
"""
