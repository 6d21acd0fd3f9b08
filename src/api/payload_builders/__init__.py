"""Payload builders por canal — construção de fragmentos de mensagem.

Estrutura:
- whatsapp/: fragmentos canônicos por tipo de conteúdo (payment, product,
  interactive, event, poll_result, group_story)

Cada tipo tem seu próprio builder, garantindo SRP e isolamento de falhas.
"""

__all__: list[str] = []
