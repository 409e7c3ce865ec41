"""Contratos (Protocol) entre el Core y las fuentes externas."""
