"""Entidades del dominio.

Por qué:
- Estructuras de datos puras: modelos Pydantic v2 de la API, la colección
  de capturas y el cursor de paginación.
- El dominio no conoce HTTP ni la CLI.
"""
