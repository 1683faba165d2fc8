"""App — adapters de canal e infraestrutura.

Subpastas:
- adapters/: ciclo de vida connect / listen / send / disconnect
- bootstrap/: composition root (logging, settings → adapter)
- infra/: HTTP com retry, inspeção de mídia, WebHookServer
- protocols/: modelos pydantic e contratos
- observability/: correlation_id
- constants/: vocabulário Activity Streams

Padrão: app executa; api adapta; config configura; utils apoia.
"""
