"""
Manifest workflows.
"""

from .rebuild_manifest_cache_wf import rebuild_manifest_cache_workflow

__all__ = ["rebuild_manifest_cache_workflow"]
