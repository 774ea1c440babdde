"""Modelos y errores del dominio.

Aquí viven las estructuras de datos puras (Pydantic v2). El dominio no
conoce HTTP ni la CLI: solo los recursos de Make y sus errores.
"""
