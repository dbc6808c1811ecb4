from .builder import build_base_params, build_params

__all__ = ["build_base_params", "build_params"]
