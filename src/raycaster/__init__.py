"""Homogeneous-coordinate sphere ray caster.

This package provides the math and output stages of a minimal ray caster:
- 4-component point/vector algebra and RGB colours
- Square matrices with cofactor determinants, inversion and affine transforms
- Ray-shape intersection with hit selection (spheres)
- Single- and multi-threaded silhouette rendering
- Canvas framebuffer with plain-text PPM (P3) export

Subpackages:
    core: Tuples, colours, matrices, transforms, rays and the render loop
    geometry: Shape base class and the sphere primitive
    scene: Intersection records and hit selection
    preview: Canvas, PPM export and Matplotlib preview
    common: Logging setup for entry points
"""

__version__ = "0.1.0"
