from sichuan.engine.tileindex.index import TileIndex, build_index

__all__ = ["TileIndex", "build_index"]
