"""Infraestrutura compartilhada: cliente HTTP, detecção de mídia e servidor de webhook."""
