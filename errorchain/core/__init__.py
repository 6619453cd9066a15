# errorchain/core/__init__.py
"""
Core components: the enriched error model and chain traversal.
"""
