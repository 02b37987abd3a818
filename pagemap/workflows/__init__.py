"""
Workflows package.
"""

from .discovery.discover_manifest_wf import create_default_engine, discover_manifest_workflow
from .manifest.rebuild_manifest_cache_wf import rebuild_manifest_cache_workflow

__all__ = [
    "create_default_engine",
    "discover_manifest_workflow",
    "rebuild_manifest_cache_workflow",
]
