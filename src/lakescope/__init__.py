"""LakeScope: environmental data service for Sardis Lake, OK."""

__version__ = "1.0.0"
