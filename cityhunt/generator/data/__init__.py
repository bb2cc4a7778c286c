from .cities import EUROPEAN_CITIES

__all__ = ["EUROPEAN_CITIES"]
