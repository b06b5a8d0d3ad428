"""Modelos y entidades del dominio.

Por qué:
- Aquí viven las estructuras de datos (Pydantic v2) del combine-config y del OAS.
- El dominio no conoce HTTP, CLI, ni JSON/YAML: solo conceptos del problema.
"""
