"""Parse an ant farm, prune its tunnels to disjoint paths and move the ants turn by turn."""

__version__ = "1.0.0"