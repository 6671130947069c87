"""Servicios del Core: motor de captura y orquestación de comandos."""
