"""Servicios del Core: codificación de URLs y despacho de peticiones."""
