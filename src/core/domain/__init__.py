"""Dominio: resultados por fuente, envelope de respuesta y errores.

Sin HTTP, sin HTML, sin CLI: solo los conceptos de una consulta de DNI.
"""
