"""Interfaces/abstracciones del Core.

Define los contratos (Protocol) que implementan los adaptadores concretos:
el transporte HTTP y la función `fetch` que reciben los endpoints.
"""
