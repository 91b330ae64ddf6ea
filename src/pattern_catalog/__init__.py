"""Pattern Catalog - Root Package.

This package is a runnable catalogue of the classic object-oriented design
patterns. Every pattern lives in its own module as an independent demo with a
``main`` entry point that prints illustrative output, and the module docstring
carries the commentary on motivation, trade-offs and use cases.

Key Components:
    - creational: Abstract Factory, Factory Method, Builder, Singleton, Prototype
    - structural: Adapter, Decorator, Composite, Facade
    - behavioral: Chain of Responsibility, Command, State, Iterator,
      Template Method, Observer, Strategy
    - domain: Catalogue value objects and exceptions
    - infrastructure: Logging, registries and singleton support
    - config: Configuration schemas and loading
    - application: Demo registration and the catalogue service
    - cli: Command-line interface

Usage:
    >>> pattern-catalog list
    >>> pattern-catalog run observer
    >>> python -m pattern_catalog.structural.decorator
"""

from ._version import __version__

PACKAGE_NAME = "pattern-catalog"

__author__ = "Pattern Catalog Contributors"
__package_name__ = PACKAGE_NAME
