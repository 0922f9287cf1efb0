"""Entities served by the lab backend and the pure derivations over them."""
