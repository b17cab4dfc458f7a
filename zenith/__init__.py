"""Window-free core of a small 3D scene engine: transforms, cameras, lights, materials, scenes and a frame loop."""

__version__ = "0.1.0"