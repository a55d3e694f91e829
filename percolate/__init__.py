"""Graphs, batch message-passing matrices, an episode environment and replay memory."""

__version__ = "0.1.0"