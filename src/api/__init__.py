"""API — camada de borda dos canais de chat.

Responsabilidades:
- Validar assinaturas e payloads de webhooks
- Normalizar payloads nativos → Activity Streams 2.0
- Construir payloads nativos a partir de atividades `send`
- Aplicar limites de API por canal

Subpastas:
- connectors/: clientes HTTP por plataforma + verificação de assinatura
- normalizers/: Parsers (normalize → parse → validate)
- payload_builders/: atividade `send` → payload nativo
- validators/: schemas `activity`/`send` e limites
- routes/: health e agregação de routers de webhook

NÃO PODE conter: sessão do adapter, fila de atividades, servidor HTTP.
"""
