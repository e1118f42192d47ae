"""
Fireworks Release Verifier

Post-release check that the Fireworks layout step wrote one JSON file per
species and that none of them shrank noticeably since the previous release.
"""

__version__ = "0.1.0"
