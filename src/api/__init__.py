"""API — camada de borda e adapter da plataforma de chat.

Responsabilidades:
- Receber o outgoing webhook de interações
- Verificar assinaturas antes de qualquer parse
- Chamar a API de controle (registro de comandos, follow-ups)

Subpastas:
- connectors/: adapters HTTP da plataforma (assinatura, cliente, erros)
- routes/: endpoints HTTP (interações, health)

NÃO PODE conter: regras de comando nem montagem de respostas.
"""
