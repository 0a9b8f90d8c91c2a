"""Application layer: ports and pure line formatting rules."""
