"""Interfaces/abstracciones del Core.

Define contratos (Protocol) que implementan el host o los tests: el Core
depende de abstracciones, no de la terminal.
"""
