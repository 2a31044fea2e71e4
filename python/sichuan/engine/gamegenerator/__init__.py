from sichuan.engine.gamegenerator.generator import BoardGenerator

__all__ = ["BoardGenerator"]
