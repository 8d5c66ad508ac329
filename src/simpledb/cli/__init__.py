"""Command protocol front end for simpledb."""

from .interpreter import CommandInterpreter

__all__ = ["CommandInterpreter"]
