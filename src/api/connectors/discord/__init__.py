"""Connector Discord — verificação de interações e API de controle."""
