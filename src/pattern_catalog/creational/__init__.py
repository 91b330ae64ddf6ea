"""Creational patterns: Abstract Factory, Factory Method, Builder, Singleton, Prototype."""
