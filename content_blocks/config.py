"""Configuration — variables d'environnement (lues à l'import)."""
import logging
import os

BLOCKS_ROUTER_PREFIX = os.getenv("BLOCKS_ROUTER_PREFIX", "/blocks")

# Niveau de log des blocs écartés / ré-identifiés au parse
BLOCKS_DIAGNOSTIC_LEVEL = logging.getLevelName(os.getenv("BLOCKS_DIAGNOSTIC_LEVEL", "WARNING").upper())
if not isinstance(BLOCKS_DIAGNOSTIC_LEVEL, int):
    BLOCKS_DIAGNOSTIC_LEVEL = logging.WARNING

# Liste "kind1,kind2,…" remplaçant le sous-ensemble simplifié (blog, services)
BLOCKS_SIMPLIFIED_KINDS = [
    k.strip() for k in os.getenv("BLOCKS_SIMPLIFIED_KINDS", "").split(",") if k.strip()
]
