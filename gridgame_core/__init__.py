"""
GridGame core Python package.

Pure game logic for GridGame, plus the thin terminal layer that drives it.
Modules:
- board.py: Board, Tile, Coord
- player.py, difficulty.py: per-player state and the three presets
- placement.py, deal.py: random placement and board setup
- moves.py, landing.py, redistribute.py, bomb.py: what happens on a turn
- actions.py: the operations a turn controller calls on a board
- validation.py, messages.py, render.py, session.py, cli.py: terminal game
"""
