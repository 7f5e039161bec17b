"""
Core domain models, money primitives, and JSON contracts.

Independent of any presentation layer (UI widgets, input binding, layout).
"""
