"""
Capa de Infraestructura - Motor de reservas.

Esta capa contiene las implementaciones concretas de los puertos (interfaces).

Estructura:
- gateways/: Adaptadores HTTP hacia el API remoto de reservas (slots, bookings)
- in_memory/: Implementaciones in-memory para desarrollo y testing
- circuit_breaker.py: Breakers que protegen las llamadas externas
"""
