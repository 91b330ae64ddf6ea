"""Structural patterns: Adapter, Decorator, Composite, Facade."""
