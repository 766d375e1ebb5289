"""Modelos de domínio Confluence: value objects, entidades, requests e respostas."""
