"""
Box Token Game

Core modules:
- models: boxes (green/blue) and players
- engine: box selection, turn alternation and play()
- pairing: Cantor pairing used by blue boxes
- trace: helpers for producing per-turn traces (no behavior changes)
"""
