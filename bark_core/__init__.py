"""
Bark core Python package.

This package contains the data structures and pure-logic helpers behind
the bark card-placement game, split into single-responsibility modules:
- board.py: Card, Coord, Board
- state.py: GameState, Phase
- deal.py: Deck, deck files and the dealer
- moves.py: adjacency, command parsing and move application
- ai.py: the automated player
- scoring.py: end-of-game chain scoring
- savefile.py: save file codec
- controller.py / cli.py: turn loop and command line driver
"""
