"""Static content catalogs for the simulator."""

from tbc_sim.sim.content.registry import ContentRegistry

__all__ = ["ContentRegistry"]
