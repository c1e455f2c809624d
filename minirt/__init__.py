"""Ray tracer for scenes of spheres, planes, cylinders and cones."""

__version__ = "0.1.0"