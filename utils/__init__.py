from .board_symmetry import BoardSymmetry

__all__ = ['BoardSymmetry']
