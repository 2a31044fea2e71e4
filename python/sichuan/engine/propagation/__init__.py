from sichuan.engine.propagation.propagator import forced_connections, propagate

__all__ = ["forced_connections", "propagate"]
