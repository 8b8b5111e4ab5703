from .inspect_path import InspectPathUseCase
from .transform_path import TransformPathUseCase

__all__ = [
    "InspectPathUseCase",
    "TransformPathUseCase",
]
