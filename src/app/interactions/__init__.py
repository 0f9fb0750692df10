"""Pipeline de interações — decodificação, roteamento e serialização.

Fluxo (após verificação de assinatura em api/connectors/discord):
    decoder.decode_interaction → router.CommandRouter.dispatch
    → encoder.encode_response → followups.FollowupDispatcher (fora do caminho síncrono)
"""
