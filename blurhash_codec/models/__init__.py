"""Data models for codec parameters and component grids."""

from .codec_params import EncodeParams, DecodeParams
from .component_grid import ComponentGrid

__all__ = ['EncodeParams', 'DecodeParams', 'ComponentGrid']
