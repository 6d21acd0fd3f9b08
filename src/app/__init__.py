"""App — coração do sistema: orquestração, casos de uso e contratos.

Subpastas:
- bootstrap/: composition root (factories, inicialização, wiring)
- coordinators/: orquestração de relay (álbum pai + filhos, relays únicos)
- use_cases/: caso de uso de composição (classifica e despacha por tipo)
- domain/: variantes tipadas de conteúdo e classificador
- protocols/: contratos dos colaboradores (gerador, uploader, transporte)
- observability/: compose_id de contexto e métricas via logs
- constants/: enums e constantes de protocolo

Padrão: app orquestra; api constrói fragmentos; config parametriza; utils apoia.
"""
