"""Adaptadores de I/O: transporte httpx y endpoints por recurso."""
