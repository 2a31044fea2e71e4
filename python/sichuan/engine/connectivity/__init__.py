from sichuan.engine.connectivity.oracle import can_connect, find_path, reach

__all__ = ["can_connect", "find_path", "reach"]
