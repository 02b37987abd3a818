"""
Discovery workflows.
"""

from .discover_manifest_wf import create_attribute_source, create_default_engine, discover_manifest_workflow

__all__ = ["create_attribute_source", "create_default_engine", "discover_manifest_workflow"]
