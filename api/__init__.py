"""HTTP surface for the move legality core."""
