"""2D primitives with 4x4 transforms, shader file lookup and a backend-free frame renderer."""

__version__ = "1.0.0"
__all__ = ["common", "transform", "shaders", "primitive", "renderer"]