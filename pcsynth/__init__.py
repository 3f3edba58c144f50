"""Labelled transition systems, resource topologies, recipes and controller synthesis."""

__version__ = "0.1.0"