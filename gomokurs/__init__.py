"""Gomoku game manager that referees AI players over stdio and TCP."""

__version__ = "0.1.0"