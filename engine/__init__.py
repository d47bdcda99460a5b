"""
Tic-tac-toe engine package.

This package plays O against a human X on square boards of any size. The
classic 3×3 board is searched exhaustively with minimax; larger (and smaller)
boards use a short list of ordered heuristics.

Modules:
    constants — Marks, outcome labels, terminal scores, board limits
    evaluate  — Win and draw detection over rows, columns and diagonals
    search    — Minimax, the N×N heuristic, and the get_best_move dispatcher
    game      — play_turn(): one human-check / engine-move / engine-check step
"""
