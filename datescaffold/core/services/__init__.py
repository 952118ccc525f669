"""
Core services — scaffold generation, template loading and rendering.
"""
