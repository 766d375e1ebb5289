"""Casos de uso (sem IO direto; dependem apenas de protocolos)."""
