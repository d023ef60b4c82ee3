"""Geometry TD: a tower defense simulation with a turtle front end."""

__version__ = "0.1.0"
