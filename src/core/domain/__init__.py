"""Modelos y entidades del dominio.

Aquí viven las estructuras de datos puras (Pydantic v2 y tipos inmutables).
El dominio no conoce la CLI, ni el sistema de ficheros: solo conceptos del
problema (tabla Morse, pasos, resultados).
"""
