"""
Atropos core Python package.

Pure game logic for choosing a move in Atropos, the triangular three-color
game where closing a triangle of three different colors loses.
Modules:
- board.py: Board, colors, neighbor geometry
- move.py: Move (a placement or a scored search node)
- moves.py: safe colors, move generation, apply_move
- search.py: depth-limited minimax (best_move)
- codec.py: referee text format
- layout.py: initial board
- config.py: SearchConfig and environment settings
"""
