"""API — construção dos fragmentos de mensagem por tipo de conteúdo.

Responsabilidades:
- Montar o fragmento canônico de cada tipo (payment, product, interactive,
  event, poll_result, group_story)
- Aplicar a tabela de defaults quando o chamador omite campos
- Delegar upload de mídia ao gerador injetado

Subpastas:
- payload_builders/: builders por canal (whatsapp/)

NÃO PODE conter: relay, orquestração de álbum, estado entre chamadas.
"""
