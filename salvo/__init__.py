"""Salvo - a two-player grid-combat (Battleship) simulation."""
