"""Small terminal games: battleship ship placement, simplified chess and Super Trunfo cards."""

__version__ = "0.1.0"