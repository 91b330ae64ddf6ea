"""Behavioral patterns: Chain of Responsibility, Command, State, Iterator, Template Method, Observer, Strategy."""
